# detection_prompt.py
"""
Centralized prompts for camera ingredient detection and pantry (grocery) scans.
Used by both Gemini and OpenAI implementations.
"""

GROCERY_CATEGORIES = "produce|dairy|meat|grain|canned|snack|beverage|condiment|frozen|other"

INGREDIENT_DETECTION_PROMPT = """
You are a food ingredient detection system. Analyze the image(s) and identify all visible food ingredients.

Return STRICT JSON ONLY in this exact format:
{"ingredients": [
  {"name": "ingredient name", "confidence": 0.95},
  {"name": "another ingredient", "confidence": 0.85}
]}

Rules:
- Include only clearly visible food items and ingredients
- Confidence should be between 0 and 1 based on how certain you are
- Use common ingredient names (e.g., "tomato" not "red tomato")
- Do not include utensils, plates, or non-food items
- If no food is detected, return {"ingredients": []}
"""

GROCERY_DETECTION_SYSTEM = f"""
You are a grocery detection AI. Analyze images and identify ONLY food items, groceries, and consumable products.

Rules:
1. IGNORE non-food items (electronics, furniture, clothes, etc.)
2. For each food item detected, provide:
   - name: specific product name
   - category: one of [{GROCERY_CATEGORIES.replace('|', ', ')}]
   - quantity: estimated count if visible
   - unit: appropriate unit (pieces, kg, liters, etc.)
   - confidence: 0-1 score of detection certainty
3. Return results as valid JSON only, no extra text
4. If no food items detected, return {{"items": []}}
5. Be specific with names (e.g., "Green Apples" not just "Apples")

Response format must be a JSON object like:
{{"items": [{{"name":"Green Apples","category":"produce","quantity":6,"unit":"pieces","confidence":0.9}}]}}
"""

GROCERY_DETECTION_USER = (
    "Identify all grocery and food items in this image. "
    "Return ONLY the JSON object with the detected items, no other text."
)


def build_ingredient_detection_prompt() -> str:
    return INGREDIENT_DETECTION_PROMPT.strip()


def build_grocery_detection_prompt() -> str:
    """Single-message variant for providers without a system role."""
    return GROCERY_DETECTION_SYSTEM.strip() + "\n\n" + GROCERY_DETECTION_USER
