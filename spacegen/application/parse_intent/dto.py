"""Parse-intent DTOs."""

from pydantic import BaseModel

from spacegen.domain.errors import ValidationError

MIN_PROMPT_LENGTH = 10
MAX_PROMPT_LENGTH = 1000


class ParseIntentRequest(BaseModel):
    """Request to read a coarse workspace configuration from a prompt."""

    prompt: str = ""

    def validated_prompt(self) -> str:
        prompt = self.prompt or ""
        if len(prompt) < MIN_PROMPT_LENGTH:
            raise ValidationError(f"Prompt must be at least {MIN_PROMPT_LENGTH} characters")
        if len(prompt) > MAX_PROMPT_LENGTH:
            raise ValidationError(f"Prompt must be at most {MAX_PROMPT_LENGTH} characters")
        return prompt
