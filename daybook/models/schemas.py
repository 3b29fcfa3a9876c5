"""
Request models
Bodies accepted by the API; update bodies only carry the fields being changed
"""

from typing import List, Optional, Union
from pydantic import BaseModel

from .habit import Frequency
from .mood import Mood
from .task import Priority, TaskCategory


class RegisterRequest(BaseModel):
    email: str
    password: str
    name: str


class LoginRequest(BaseModel):
    email: str
    password: str


class TaskCreate(BaseModel):
    title: str
    description: Optional[str] = None
    priority: Priority = "medium"
    category: TaskCategory = "personal"
    due_date: Optional[str] = None
    completed: bool = False


class TaskUpdate(BaseModel):
    title: Optional[str] = None
    description: Optional[str] = None
    priority: Optional[Priority] = None
    category: Optional[TaskCategory] = None
    due_date: Optional[str] = None
    completed: Optional[bool] = None


class EventCreate(BaseModel):
    title: str
    description: Optional[str] = None
    start_date: str
    end_date: str
    all_day: bool = False
    color: Optional[str] = None


class EventUpdate(BaseModel):
    title: Optional[str] = None
    description: Optional[str] = None
    start_date: Optional[str] = None
    end_date: Optional[str] = None
    all_day: Optional[bool] = None
    color: Optional[str] = None


class JournalCreate(BaseModel):
    title: str
    content: str
    mood: Optional[Mood] = None
    # Comma-separated string or list
    tags: Union[str, List[str]] = []
    date: str


class JournalUpdate(BaseModel):
    title: Optional[str] = None
    content: Optional[str] = None
    mood: Optional[Mood] = None
    tags: Optional[Union[str, List[str]]] = None
    date: Optional[str] = None


class GoalCreate(BaseModel):
    title: str
    description: Optional[str] = None
    target_value: float
    current_value: float = 0
    unit: str
    category: str
    deadline: Optional[str] = None
    completed: bool = False


class GoalUpdate(BaseModel):
    title: Optional[str] = None
    description: Optional[str] = None
    target_value: Optional[float] = None
    current_value: Optional[float] = None
    unit: Optional[str] = None
    category: Optional[str] = None
    deadline: Optional[str] = None
    completed: Optional[bool] = None


class ProgressUpdate(BaseModel):
    value: float


class HabitCreate(BaseModel):
    name: str
    description: Optional[str] = None
    frequency: Frequency = "daily"


class HabitUpdate(BaseModel):
    name: Optional[str] = None
    description: Optional[str] = None
    frequency: Optional[Frequency] = None


class HabitToggle(BaseModel):
    # Defaults to today
    day: Optional[str] = None


class MoodLog(BaseModel):
    mood: Mood
    notes: Optional[str] = None
