from typing import List, Any
import logging
from fastapi import APIRouter, Depends, HTTPException, status

from lawdesk.core.auth import get_current_user
from lawdesk.core.database import get_storage
from lawdesk.crud.quick_action import render_template
from lawdesk.schemas.base import Message
from lawdesk.schemas.quick_action import (
    QuickAction,
    QuickActionCreate,
    QuickActionUpdate,
    QuickActionRenderRequest,
    QuickActionRenderResponse,
)
from lawdesk.schemas.user import UserInDB
from lawdesk.storage import Storage

logger = logging.getLogger(__name__)
router = APIRouter()


@router.get("", response_model=List[QuickAction])
async def get_quick_actions(
    storage: Storage = Depends(get_storage),
    current_user: UserInDB = Depends(get_current_user),
) -> Any:
    """
    Retrieve quick actions (reusable text templates).
    """
    return storage.list_quick_actions()


@router.post("", response_model=QuickAction, status_code=status.HTTP_201_CREATED)
async def create_quick_action(
    *,
    action_in: QuickActionCreate,
    storage: Storage = Depends(get_storage),
    current_user: UserInDB = Depends(get_current_user),
) -> Any:
    return storage.create_quick_action(action_in, created_by_id=current_user.id)


@router.get("/{action_id}", response_model=QuickAction)
async def read_quick_action(
    action_id: int,
    storage: Storage = Depends(get_storage),
    current_user: UserInDB = Depends(get_current_user),
) -> Any:
    action = storage.get_quick_action(action_id)
    if not action:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Quick action not found"
        )
    return action


@router.put("/{action_id}", response_model=QuickAction)
@router.patch("/{action_id}", response_model=QuickAction)
async def update_quick_action(
    *,
    action_id: int,
    action_in: QuickActionUpdate,
    storage: Storage = Depends(get_storage),
    current_user: UserInDB = Depends(get_current_user),
) -> Any:
    action = storage.update_quick_action(action_id, action_in)
    if not action:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Quick action not found"
        )
    return action


@router.delete("/{action_id}", response_model=Message)
async def delete_quick_action(
    action_id: int,
    storage: Storage = Depends(get_storage),
    current_user: UserInDB = Depends(get_current_user),
) -> Any:
    if not storage.delete_quick_action(action_id):
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Quick action not found"
        )
    return {"message": "Quick action deleted successfully"}


@router.post("/{action_id}/render", response_model=QuickActionRenderResponse)
async def render_quick_action(
    *,
    action_id: int,
    render_in: QuickActionRenderRequest,
    storage: Storage = Depends(get_storage),
    current_user: UserInDB = Depends(get_current_user),
) -> Any:
    """
    Fill the template's {placeholders} with the given values.
    """
    action = storage.get_quick_action(action_id)
    if not action:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Quick action not found"
        )
    return {"content": render_template(action.template_content, render_in.values)}
