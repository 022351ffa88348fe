"""Generate-content DTOs."""

from pydantic import BaseModel, ConfigDict, Field

from spacegen.domain.entities.intent import IntentOutline


class GenerateContentRequest(BaseModel):
    """Intent from parse-intent plus the user's original description."""

    model_config = ConfigDict(populate_by_name=True)

    intent: IntentOutline
    user_prompt: str = Field(alias="userPrompt")
