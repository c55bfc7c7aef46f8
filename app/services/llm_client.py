from openai import OpenAI
from typing import Optional
import logging

logger = logging.getLogger(__name__)

class LanguageModelClient:
    """Single-prompt text generation over the OpenAI chat completions API"""

    def __init__(self, api_key: str, temperature: float = 0.2, max_tokens: int = 2000,
                 client: Optional[OpenAI] = None):
        self.client = client or OpenAI(api_key=api_key)
        self.temperature = temperature
        self.max_tokens = max_tokens

    def generate_text(self, model: str, prompt: str) -> str:
        """Send ``prompt`` as one user message and return the completion text"""
        response = self.client.chat.completions.create(
            model=model,
            messages=[{"role": "user", "content": prompt}],
            temperature=self.temperature,
            max_tokens=self.max_tokens
        )
        content = response.choices[0].message.content if response.choices else None
        if not content:
            logger.warning(f"Model {model} returned an empty completion")
            return ""
        return content.strip()
