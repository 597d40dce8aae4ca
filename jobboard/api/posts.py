from fastapi import APIRouter, Depends, status

from jobboard.api.deps import get_session
from jobboard.api.schemas import PostCreate, PostCreatedOut, PostDeletedOut, PostOut
from jobboard.services import posts

router = APIRouter()


@router.get("", response_model=list[PostOut])
def list_posts(session=Depends(get_session)):
    return posts.list_all(session)


@router.get("/user/{user_id}", response_model=list[PostOut])
def list_posts_by_user(user_id: str, session=Depends(get_session)):
    return posts.list_by_user(session, user_id)


@router.get("/{post_id}", response_model=PostOut)
def get_post(post_id: str, session=Depends(get_session)):
    return posts.get_by_id(session, post_id)


@router.post("", response_model=PostCreatedOut, status_code=status.HTTP_201_CREATED)
def create_post(payload: PostCreate, session=Depends(get_session)):
    post = posts.create(
        session,
        payload.user_id,
        payload.title,
        payload.company,
        payload.location,
        payload.employment_type,
        payload.description,
        posted_date=payload.posted_date,
        salary_min=payload.salary_min,
        salary_max=payload.salary_max,
    )
    return {"message": "Post successfully created", "post": post}


@router.delete("/{post_id}", response_model=PostDeletedOut)
def delete_post(post_id: str, session=Depends(get_session)):
    # Unknown ids are not an error; the count tells the caller what happened
    affected = posts.delete(session, post_id)
    return {"message": "Post deleted", "affected_rows": affected}
