"""
User directory endpoint.

Lists the users issues can be assigned to so clients can discover
valid ``userId`` values.  The directory is fixed; there is no way to
create or remove users.
"""

from typing import List

from fastapi import APIRouter, Depends

from issue_tracker_api.app.api.dependencies import get_user_directory
from issue_tracker_api.app.schemas.user import UserRead
from issue_tracker_api.app.services.user_directory import UserDirectory

router = APIRouter()


@router.get("", response_model=List[UserRead], summary="List assignable users")
def list_users(directory: UserDirectory = Depends(get_user_directory)) -> List[UserRead]:
    return directory.list_users()
