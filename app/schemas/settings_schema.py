from pydantic import BaseModel, field_validator

SUPPORTED_LANGUAGES = ("", "en", "ja", "zh-Hans", "ko", "es", "fr", "de", "pt-BR")


class LanguageSetting(BaseModel):
    # "" follows the system language
    language: str = ""

    @field_validator("language")
    @classmethod
    def supported_language(cls, value):
        value = value.strip()
        if value not in SUPPORTED_LANGUAGES:
            raise ValueError(f"Unsupported language: {value}")
        return value


class AboutResponse(BaseModel):
    name: str
    version: str
