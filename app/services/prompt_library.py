# /app/services/prompt_library.py

"""
Central library for the prompts sent to the AI provider. Prompts are kept
here as code so that changes to them are reviewed like any other change.
"""

CODE_GENERATION_SYSTEM_PROMPT = """
You are an expert {language} software engineer. You write correct, idiomatic,
well-structured {language} code that follows the language's standard conventions.
"""

CODE_GENERATION_PROMPT = """
{system_prompt}
**--- TASK ---**
{prompt}

**--- RULES ---**

1.  **LANGUAGE:** The solution MUST be written in {language}.
2.  **CODE ONLY:** Respond with the source code only. Do not add explanations before or after the code.
3.  **COMMENTS:** Brief inline comments are allowed where they help a reader follow the code.
4.  **COMPLETE:** Include every import and helper the code needs to run.
"""


def build_code_generation_prompt(prompt: str, language: str) -> str:
    system_prompt = CODE_GENERATION_SYSTEM_PROMPT.format(language=language).strip()
    return CODE_GENERATION_PROMPT.format(
        system_prompt=system_prompt,
        prompt=prompt.strip(),
        language=language,
    )
