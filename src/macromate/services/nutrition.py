"""Natural-language meal parsing via the AI gateway."""

import logging
from dataclasses import dataclass

from macromate.domain.nutrition import NutritionRecord
from macromate.services.ai import CompletionClient
from macromate.services.parsing import normalize_nutrition

_logger = logging.getLogger(__name__)

NUTRITION_SYSTEM_PROMPT = """You are a nutrition expert. Parse the food description \
and estimate accurate nutritional values.

IMPORTANT: Return ONLY valid JSON with this exact structure:
{
  "name": "Brief descriptive name of the food/meal",
  "calories": <number>,
  "protein": <number in grams>,
  "carbs": <number in grams>,
  "fat": <number in grams>,
  "fiber": <number in grams>,
  "sugar": <number in grams>,
  "servings": <number, default 1>
}

Be accurate with common foods. For example:
- 1 large egg: ~70 cal, 6g protein, 0g carbs, 5g fat
- 1 slice white bread: ~75 cal, 2g protein, 14g carbs, 1g fat
- 1 cup orange juice: ~110 cal, 2g protein, 26g carbs, 0g fat

Sum up all items mentioned. Round to whole numbers."""


@dataclass
class NutritionParsingService:
    """Service that asks the LLM for nutrition estimates and sanitizes them."""

    client: CompletionClient
    model: str
    temperature: float = 0.3

    async def parse(self, text: str) -> NutritionRecord:
        """Estimate nutrition for a free-text food description."""
        if not text or not text.strip():
            raise ValueError("Text is required")
        content = await self.client.complete(
            model=self.model,
            system_prompt=NUTRITION_SYSTEM_PROMPT,
            user_prompt=f'Parse this food description: "{text}"',
            temperature=self.temperature,
        )
        record = normalize_nutrition(content, fallback_name=text)
        _logger.info(
            "Parsed nutrition: name=%s calories=%s", record.name, record.calories
        )
        return record
