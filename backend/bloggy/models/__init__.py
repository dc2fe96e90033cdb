from bloggy.models.comment import Comment
from bloggy.models.post import Post
from bloggy.models.user import User

__all__ = [
    "Comment",
    "Post",
    "User",
]
