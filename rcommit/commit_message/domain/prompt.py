"""Prompt template for commit message generation."""

PROMPT_TEMPLATE = """Create a conventional commit message for the following changes.

Context: {context}.

File changes:
{diff}
"""


def render_prompt(context: str, diff_text: str) -> str:
    """
    Substitute the context and diff text into the prompt template.

    Both values are inserted as data, so braces inside a diff are kept as is.

    Args:
        context: Free text supplied by the user
        diff_text: Rendered staged diff

    Returns:
        The prompt to send to the completion backend
    """
    return PROMPT_TEMPLATE.format(context=context, diff=diff_text)
