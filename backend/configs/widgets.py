"""
Front-end widget configuration settings.

Values served to the summary card and the chat assistant widget. The
defaults match what the widgets render when nothing is configured.

Dependencies: pydantic, pydantic_settings
System role: Display configuration for the AI summary and assistant widgets
"""

from pydantic import Field
from pydantic_settings import SettingsConfigDict

from backend.configs.base import BaseSettings

DEFAULT_ASSISTANT_ICON = "/plugins/summaraidGPT/assets/static/icon.svg"
DEFAULT_SUGGESTIONS = [
    "你是谁?",
    "如何设计网站封面?",
    "如何学习编程?",
    "讲讲AI的未来发展",
    "什么是人工智能",
]


class SummaryDisplaySettings(BaseSettings):
    """Summary card appearance."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="SUMMARY_",
        case_sensitive=False,
        extra="ignore",
    )

    enable: bool = Field(default=True)
    enable_ui_injection: bool = Field(default=True)
    logo: str = Field(default="icon.svg")
    summary_title: str = Field(default="文章摘要")
    gpt_name: str = Field(default="智阅GPT")
    type_speed: int = Field(default=20, ge=0)
    dark_selector: str = Field(default="")
    theme_name: str = Field(default="custom")
    typewriter: bool = Field(default=True)

    theme_bg: str = Field(default="#f7f9fe")
    theme_main: str = Field(default="#4F8DFD")
    theme_content_font_size: str = Field(default="16px")
    theme_title: str = Field(default="#3A5A8C")
    theme_content: str = Field(default="#222")
    theme_gpt_name: str = Field(default="#7B88A8")
    theme_content_bg: str = Field(default="#fff")
    theme_border: str = Field(default="#e3e8f7")
    theme_shadow: str = Field(default="0 2px 12px 0 rgba(60,80,180,0.08)")
    theme_tag_bg: str = Field(default="#f0f4ff")
    theme_cursor: str = Field(default="#4F8DFD")


class AssistantSettings(BaseSettings):
    """Chat assistant widget appearance."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="ASSISTANT_",
        case_sensitive=False,
        extra="ignore",
    )

    enable: bool = Field(default=True)
    icon: str = Field(default=DEFAULT_ASSISTANT_ICON)
    conversation_icon: str = Field(default=DEFAULT_ASSISTANT_ICON)
    name: str = Field(default="智阅GPT助手")
    input_placeholder: str = Field(default="请输入您想了解的问题...")
    dialog_type: str = Field(default="overlay")
    button_position: str = Field(default="right")
    suggestions: list[str] = Field(default_factory=lambda: list(DEFAULT_SUGGESTIONS))
