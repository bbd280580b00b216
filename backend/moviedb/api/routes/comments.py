from fastapi import APIRouter

from moviedb.api.deps import SessionDep
from moviedb.models.comment import CommentPublic, CommentUpdate
from moviedb.services import comments as comments_service

router = APIRouter(prefix="/comments", tags=["comments"])


@router.get("", response_model=list[CommentPublic])
def read_comments(session: SessionDep) -> list[CommentPublic]:
    return comments_service.get_comments(session=session)


@router.put("/{id}", response_model=CommentPublic)
def update_comment(
    *,
    session: SessionDep,
    id: int,
    comment_in: CommentUpdate | None = None,
) -> CommentPublic:
    return comments_service.update_comment(
        session=session,
        comment_id=id,
        comment_update=comment_in or CommentUpdate(),
    )


@router.delete("/{id}", response_model=CommentPublic)
def delete_comment(*, session: SessionDep, id: int) -> CommentPublic:
    return comments_service.delete_comment(session=session, comment_id=id)
