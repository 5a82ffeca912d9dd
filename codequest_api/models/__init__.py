"""
Database models
"""

from codequest_api.models.hello import HelloRead
from codequest_api.models.project import Project, ProjectRead
from codequest_api.models.task import Task, TaskRead
from codequest_api.models.user import User, UserRead

__all__ = ["HelloRead", "User", "UserRead", "Project", "ProjectRead", "Task", "TaskRead"]
