"""
Analysis Data Models
"""
from enum import Enum
from typing import Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field


class Priority(str, Enum):
    HIGH = "High"
    MEDIUM = "Medium"
    LOW = "Low"


class UserType(str, Enum):
    USER = "user"
    ADMIN = "admin"


class AnalysisResult(BaseModel):
    """What the description analyzer inferred from a free-text description."""

    model_config = ConfigDict(frozen=True)

    components: Tuple[str, ...] = Field(default=(), description="Categories matched by keyword")
    test_types: Tuple[str, ...] = Field(default=("functional", "ui"), description="Test types, never empty")
    priority: Priority = Priority.MEDIUM
    user_type: UserType = UserType.USER
    page_type: Optional[str] = Field(default=None, description="Page type classified from the file name")
    detected_components: Tuple[str, ...] = Field(default=(), description="Categories the resolver expands")


class ComponentDescriptor(BaseModel):
    """A catalogue category expanded with its display name and scenarios."""

    model_config = ConfigDict(frozen=True)

    category: str
    display_name: str
    scenarios: Tuple[str, ...] = ()
