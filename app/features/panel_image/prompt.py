# app/features/panel_image/prompt.py
LIKENESS_INSTRUCTION = (
    " Incorporate the features of the person or object in the attached image"
    " so the character looks like them."
)

def build_panel_image_prompt(*, description: str, with_reference: bool = False) -> str:
    prompt = (
        "Create a comic book style image based on the following description: "
        f"{description}. Use vibrant colors and strong lines."
    )
    if with_reference:
        prompt += LIKENESS_INSTRUCTION
    return prompt
