"""Prompt templates and the network-free fallback text.

Every function here is pure: the same inputs always give the same output,
and nothing touches the network or any shared state.
"""

from enum import Enum
from typing import Callable, Dict, Optional

from .models import PromptSpec, StyleParameters

MARKETING_MAX_TOKENS = 600
TOOL_MAX_TOKENS = 250


class Template(str, Enum):
    """Content templates a caller can ask for."""

    CUSTOM = "custom"
    FACEBOOK = "facebook"
    INSTAGRAM = "instagram"
    TWITTER = "twitter"
    LINKEDIN = "linkedin"
    WHATSAPP = "whatsapp"
    EMAIL = "email"
    AD = "ad"
    TOOL = "tool"

    @classmethod
    def parse(cls, value: Optional[str]) -> "Template":
        """Case-insensitive lookup; unknown or missing names map to CUSTOM."""
        if not value:
            return cls.CUSTOM
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            return cls.CUSTOM


class Tool(str, Enum):
    """Quick rewriting tools."""

    REPHRASE = "rephrase"
    TRANSLATE_HINGLISH = "translate_hinglish"
    HASHTAGS = "hashtags"
    SHORTEN = "shorten"
    GENERAL = "general"


TOOL_PROMPTS: Dict[Tool, Callable[[str], str]] = {
    Tool.REPHRASE: lambda text: (
        f"Rephrase this marketing text in a catchy, professional tone:\n\n{text}"
    ),
    Tool.TRANSLATE_HINGLISH: lambda text: (
        "Translate this English marketing text into Hinglish "
        f"(Hindi words in Latin script):\n\n{text}"
    ),
    Tool.HASHTAGS: lambda text: (
        "Extract 10 short, relevant marketing hashtags (without # symbol) "
        f"from this text:\n\n{text}\n\nReturn them comma-separated."
    ),
    Tool.SHORTEN: lambda text: (
        f"Shorten this content to a catchy caption of max 25 words:\n\n{text}"
    ),
}

TEMPLATE_INSTRUCTIONS: Dict[Template, str] = {
    Template.CUSTOM: "Generate creative, brand-relevant, and engaging marketing content based on the details above.",
    Template.FACEBOOK: "Write a Facebook post with a strong hook, a short body and a clear call to action.",
    Template.INSTAGRAM: "Write an Instagram caption with emojis and 5-8 relevant hashtags at the end.",
    Template.TWITTER: "Write a tweet under 280 characters with one or two hashtags.",
    Template.LINKEDIN: "Write a professional LinkedIn post that highlights value for the reader.",
    Template.WHATSAPP: "Write a short, friendly WhatsApp broadcast message.",
    Template.EMAIL: "Write a marketing email with a subject line, a greeting, a short body and a call to action.",
    Template.AD: "Write ad copy with a headline, a one-line description and a call to action.",
}

FALLBACK_BODIES: Dict[Template, Callable[[str], str]] = {
    Template.CUSTOM: lambda text: (
        f"{text}\n\nDiscover what makes us different. Get in touch today!"
    ),
    Template.FACEBOOK: lambda text: (
        f"Big news! {text}\n\nCome see us, tell your friends, and share this post. "
        "We can't wait to welcome you!"
    ),
    Template.INSTAGRAM: lambda text: (
        f"{text}\n\nTap the link in bio to learn more.\n\n#smallbusiness #newlaunch #shoplocal"
    ),
    Template.TWITTER: lambda text: f"{text}. Don't miss out! #NowOpen",
    Template.LINKEDIN: lambda text: (
        f"We're excited to share an update: {text}.\n\n"
        "Thank you to our customers and partners for the support. Let's connect!"
    ),
    Template.WHATSAPP: lambda text: f"Hi! {text}. Reply to this message to know more.",
    Template.EMAIL: lambda text: (
        f"Subject: {text}\n\nHello,\n\n{text}. We'd love for you to be part of it.\n\n"
        "Best regards,\nThe Team"
    ),
    Template.AD: lambda text: f"{text}\nLimited time only. Visit us today!",
    Template.TOOL: lambda text: text,
}


def is_tool_request(style: StyleParameters) -> bool:
    return (
        style.action == "tool"
        or Template.parse(style.template) is Template.TOOL
        or bool(style.tool)
    )


def build_tool_prompt(tool: Optional[str], text: str) -> str:
    """Build the prompt for a quick rewriting tool."""
    name = (tool or Tool.GENERAL.value).strip().lower()
    try:
        formatter = TOOL_PROMPTS.get(Tool(name))
    except ValueError:
        formatter = None
    if formatter is None:
        return f"Perform this quick marketing task: {name}\n\n{text}"
    return formatter(text)


def build_marketing_prompt(text: str, style: StyleParameters) -> str:
    """Build the full marketing brief for a template."""
    template = Template.parse(style.template)
    label = style.template if template is Template.CUSTOM and style.template else template.value
    creativity = style.creativity if style.creativity is not None else 70
    return (
        f"Template: {label.title() if label else 'Custom'}\n"
        f"Business Type: {style.business_type or 'General'}\n"
        f"Tone: {style.tone or 'Casual'}\n"
        f"Length: {style.length or 'Medium'}\n"
        f"Creativity: {creativity}%\n"
        f"User Prompt: {text}\n\n"
        f"{TEMPLATE_INSTRUCTIONS[template]}"
    )


def build_prompt(text: str, style: StyleParameters) -> PromptSpec:
    """Apply the template transform to the user's text."""
    if is_tool_request(style):
        return PromptSpec(text=build_tool_prompt(style.tool, text), max_tokens=TOOL_MAX_TOKENS)
    return PromptSpec(text=build_marketing_prompt(text, style), max_tokens=MARKETING_MAX_TOKENS)


def fallback_text(text: str, template: Optional[str] = None) -> str:
    """Deterministic local substitute used when no provider answers."""
    return FALLBACK_BODIES[Template.parse(template)](text.strip())
