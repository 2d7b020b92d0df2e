"""LLM Configuration Module - provider catalog and supported languages."""

from typing import Optional

from pydantic import BaseModel, Field


class LLMProviderConfig(BaseModel):
    """Catalog entry for a provider family."""
    name: str
    display_name: str
    models: list[str] = Field(default_factory=list)
    default_model: str
    needs_region: bool = False
    needs_endpoint: bool = False
    custom_model_input: bool = False  # If true, user may type a deployment name
    endpoint_placeholder: Optional[str] = None


class LanguageInfo(BaseModel):
    """A target language offered for translation."""
    code: str
    name: str
    flag: str = ""


DEFAULT_PROVIDERS: list[LLMProviderConfig] = [
    LLMProviderConfig(
        name="openai",
        display_name="OpenAI",
        models=["gpt-5-mini", "gpt-5-nano-2025-08-07"],
        default_model="gpt-5-mini",
    ),
    LLMProviderConfig(
        name="azure",
        display_name="Azure OpenAI",
        models=["gpt-5-nano", "gpt-5-mini"],
        default_model="gpt-5-nano",
        needs_endpoint=True,
        custom_model_input=True,
        endpoint_placeholder="https://xxx.openai.azure.com",
    ),
    LLMProviderConfig(
        name="bedrock",
        display_name="AWS Bedrock",
        models=[
            "global.anthropic.claude-haiku-4-5-20251001-v1:0",
            "global.anthropic.claude-sonnet-4-5-20250929-v1:0",
            "global.anthropic.claude-opus-4-5-20251101-v1:0",
        ],
        default_model="global.anthropic.claude-haiku-4-5-20251001-v1:0",
        needs_region=True,
    ),
    LLMProviderConfig(
        name="github",
        display_name="GitHub Models",
        models=["gpt-4o", "gpt-4o-mini", "o1-mini", "o1-preview", "Phi-3.5-mini-instruct"],
        default_model="gpt-4o-mini",
    ),
]


SUPPORTED_LANGUAGES: list[LanguageInfo] = [
    LanguageInfo(code="fr", name="French", flag="🇫🇷"),
    LanguageInfo(code="es", name="Spanish", flag="🇪🇸"),
    LanguageInfo(code="de", name="German", flag="🇩🇪"),
    LanguageInfo(code="ja", name="Japanese", flag="🇯🇵"),
    LanguageInfo(code="ko", name="Korean", flag="🇰🇷"),
    LanguageInfo(code="zh-HK", name="Chinese (HK)", flag="🇭🇰"),
    LanguageInfo(code="zh-Hans", name="Chinese (Simplified)", flag="🇨🇳"),
    LanguageInfo(code="ar", name="Arabic", flag="🇸🇦"),
    LanguageInfo(code="tr", name="Turkish", flag="🇹🇷"),
    LanguageInfo(code="id", name="Indonesian", flag="🇮🇩"),
    LanguageInfo(code="pt-BR", name="Portuguese (BR)", flag="🇧🇷"),
    LanguageInfo(code="it", name="Italian", flag="🇮🇹"),
    LanguageInfo(code="ru", name="Russian", flag="🇷🇺"),
    LanguageInfo(code="nl", name="Dutch", flag="🇳🇱"),
    LanguageInfo(code="pl", name="Polish", flag="🇵🇱"),
    LanguageInfo(code="th", name="Thai", flag="🇹🇭"),
    LanguageInfo(code="vi", name="Vietnamese", flag="🇻🇳"),
    LanguageInfo(code="hi", name="Hindi", flag="🇮🇳"),
    LanguageInfo(code="sv", name="Swedish", flag="🇸🇪"),
    LanguageInfo(code="da", name="Danish", flag="🇩🇰"),
]

# Names used inside prompts; more explicit than the UI labels above
LANGUAGE_NAMES: dict[str, str] = {
    "fr": "French",
    "es": "Spanish",
    "de": "German",
    "ja": "Japanese",
    "ko": "Korean",
    "zh-HK": "Traditional Chinese (Hong Kong)",
    "zh-Hans": "Simplified Chinese",
    "ar": "Arabic",
    "tr": "Turkish",
    "id": "Indonesian",
    "pt-BR": "Portuguese (Brazilian)",
    "it": "Italian",
    "ru": "Russian",
    "nl": "Dutch",
    "pl": "Polish",
    "th": "Thai",
    "vi": "Vietnamese",
    "hi": "Hindi",
    "sv": "Swedish",
    "da": "Danish",
}


def language_label(code: str) -> str:
    """Format a locale for prompts, e.g. ``fr (French)``."""
    return f"{code} ({LANGUAGE_NAMES.get(code, code)})"
