from fastapi import status

from .base import AppError


class CommentNotFoundError(AppError):
    status_code = status.HTTP_404_NOT_FOUND

    def __init__(self, comment_id: int):
        self.comment_id = comment_id
        detail = f"Comment with id {comment_id} not found!"
        super().__init__(detail)
