"""To-do domain models"""
from datetime import datetime, timezone
from typing import Optional
from uuid import UUID, uuid4

from pydantic import BaseModel, ConfigDict, Field

GROUP_COLORS = ("orange", "blue", "green", "purple", "pink", "red", "yellow", "teal")


class TodoGroup(BaseModel):
    """Named list that to-do items belong to"""
    model_config = ConfigDict(populate_by_name=True)

    id: UUID = Field(default_factory=uuid4)
    name: str
    icon: str = "folder.fill"
    color_name: str = Field("orange", alias="colorName")
    order: int = 0

    @property
    def color(self) -> str:
        # unknown colours render as the default orange
        return self.color_name if self.color_name in GROUP_COLORS else "orange"


class TodoItem(BaseModel):
    """Single to-do entry"""
    model_config = ConfigDict(populate_by_name=True)

    id: UUID = Field(default_factory=uuid4)
    title: str
    is_completed: bool = Field(False, alias="isCompleted")
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc), alias="createdAt")
    due_date: Optional[datetime] = Field(None, alias="dueDate")
    group_id: UUID = Field(..., alias="groupId")


class TodoItemUpdate(BaseModel):
    """To-do update model - all fields optional"""
    title: Optional[str] = None
    is_completed: Optional[bool] = None
    due_date: Optional[datetime] = None
    group_id: Optional[UUID] = None
