"""Build-space DTOs."""

from pydantic import BaseModel

from spacegen.domain.errors import ValidationError

PROMPT_TOO_SHORT = "Prompt too short"


class BuildSpaceRequest(BaseModel):
    """Request to build a workspace from a short description."""

    # Length is checked by the use case so the stream can report it as an event
    prompt: str = ""

    def validated_prompt(self, min_length: int) -> str:
        """Prompt ready for the model, or ValidationError when it is too short.

        The minimum applies to the text as sent, surrounding whitespace included.
        """
        prompt = self.prompt or ""
        if len(prompt) < min_length:
            raise ValidationError(PROMPT_TOO_SHORT)
        return prompt.strip()
