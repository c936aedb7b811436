from shopfront.domains.languages.schemas import LanguageCreate, LanguageResponse, LanguageUpdate
from shopfront.domains.languages.services import LanguageService

__all__ = ["LanguageCreate", "LanguageResponse", "LanguageUpdate", "LanguageService"]
