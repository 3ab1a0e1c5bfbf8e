from pydantic import BaseModel, ConfigDict, Field


class Task(BaseModel):
    """
    A single entry in a task list.

    Tasks are addressed by their title. Titles are free-form and are not
    required to be unique.

    Attributes:
        title (str): Title of the task, used as its key
    """
    model_config = ConfigDict(validate_assignment=True)

    title: str = Field(..., description="Title of the task")
