# Application services
from .order_commit_service import OrderCommitService

__all__ = ['OrderCommitService']
