"""
AI class analysis via Google Gemini.

One request with the class figures and a fixed JSON schema, one parsed
response. Failures are logged and reported as None; there are no retries.
"""
import json
import logging

import google.generativeai as genai

from temrintakip.config import config

logger = logging.getLogger(__name__)

SYSTEM_INSTRUCTION = (
    "Sen profesyonel bir eğitim asistanısın. Verileri analiz ederek öğretmene "
    "sınıfın durumu hakkında pedagojik içgörüler ve somut öneriler sun."
)

ANALYSIS_FIELDS = ["summary", "strengths", "weaknesses", "recommendations"]

ANALYSIS_SCHEMA = {
    "type": "OBJECT",
    "properties": {
        "summary": {"type": "STRING", "description": "Genel durum özeti"},
        "strengths": {
            "type": "ARRAY",
            "items": {"type": "STRING"},
            "description": "Sınıfın başarılı olduğu alanlar",
        },
        "weaknesses": {
            "type": "ARRAY",
            "items": {"type": "STRING"},
            "description": "Geliştirilmesi gereken noktalar",
        },
        "recommendations": {
            "type": "ARRAY",
            "items": {"type": "STRING"},
            "description": "Öğretmen için 3 adet aksiyon önerisi",
        },
    },
    "required": ANALYSIS_FIELDS,
}


def build_prompt(stats: dict) -> str:
    """Textual summary of the class figures sent to the model."""
    exercises = [{"name": e["name"], "Puan": e["score"]} for e in stats["exercise_averages"]]
    return (
        "Analyze this student performance data for a teacher in Turkish:\n"
        f"- Class Average: {stats['avg_score']:.1f}\n"
        f"- Success Rate: %{stats['success_rate']:.0f}\n"
        f"- Exercises Performance: {json.dumps(exercises, ensure_ascii=False)}\n"
        f"- Student Avgs: {json.dumps(stats['student_averages'], ensure_ascii=False)}"
    )


def parse_analysis(text: str):
    """Parse the model's JSON reply into the analysis dict, or None if malformed."""
    if not text:
        return None

    # Strip markdown code fences if present
    text = text.strip()
    if text.startswith('```'):
        lines = [l for l in text.split('\n') if not l.strip().startswith('```')]
        text = '\n'.join(lines)

    data = json.loads(text)
    if not isinstance(data, dict) or not isinstance(data.get("summary"), str):
        return None

    analysis = {"summary": data["summary"]}
    for field in ANALYSIS_FIELDS[1:]:
        items = data.get(field)
        if not isinstance(items, list):
            return None
        analysis[field] = [str(item) for item in items]
    return analysis


def analyze_class(stats):
    """
    Ask Gemini for a structured analysis of the class.

    Returns:
        dict with summary, strengths, weaknesses, recommendations;
        None when there is nothing to analyse or the call failed.
    """
    if not stats:
        return None

    if not config.gemini_api_key:
        logger.warning("GEMINI_API_KEY not configured, skipping class analysis")
        return None

    try:
        genai.configure(api_key=config.gemini_api_key)
        model = genai.GenerativeModel(config.gemini_model, system_instruction=SYSTEM_INSTRUCTION)
        response = model.generate_content(
            build_prompt(stats),
            generation_config=genai.GenerationConfig(
                response_mime_type="application/json",
                response_schema=ANALYSIS_SCHEMA,
            ),
        )
        analysis = parse_analysis(response.text)
        if analysis is None:
            logger.error("AI analysis returned an unexpected shape")
        return analysis
    except json.JSONDecodeError:
        logger.error("AI analysis returned non-JSON response")
        return None
    except Exception as e:
        logger.error("AI analysis failed: %s", e)
        return None
