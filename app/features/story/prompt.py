# app/features/story/prompt.py
def build_story_prompt(*, prompt: str, language: str, min_panels: int = 4, max_panels: int = 6) -> str:
    return f"""
Write a short story for a comic book based on the following theme: "{prompt}".

Split the story into {min_panels} to {max_panels} panels.
For each panel provide:
* **visualDescription:** a detailed visual description of the scene, written for an image generator (characters, setting, action, framing).
* **caption:** the caption or speech balloon text shown under the panel.

Also give the comic a short, catchy title.

The title and every caption must be written in the language "{language}". Visual descriptions may be in English.

**JSON SCHEMA:**
```json
{{"title": "Comic title", "panels": [{{"visualDescription": "Scene for panel 1", "caption": "Text for panel 1"}}]}}
```""".strip()
