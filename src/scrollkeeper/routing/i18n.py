"""Language-prefixed paths.

The default language is served unprefixed; every other language lives
under ``/{code}``::

    /about       default language
    /en/about    English
    /en          English home (same page as ``/``)
"""

from dataclasses import dataclass

from scrollkeeper.errors import UnsupportedLanguageError


@dataclass(frozen=True, slots=True)
class LanguagePaths:
    """Split, build, and compare language-prefixed paths."""

    languages: tuple[str, ...] = ("ko", "en", "jp")
    default: str = "ko"

    def __post_init__(self) -> None:
        if self.default not in self.languages:
            raise UnsupportedLanguageError(self.default, self.languages)

    def split(self, path: str) -> tuple[str | None, str]:
        """Return ``(language, clean_path)``; language is ``None`` when unprefixed.

        Only non-default languages are recognized as prefixes.
        """
        head, sep, rest = path[1:].partition("/")
        if head in self.languages and head != self.default:
            return head, "/" + rest if sep else "/"
        return None, path

    def language_of(self, path: str) -> str:
        language, _ = self.split(path)
        return language or self.default

    def localize(self, path: str, language: str) -> str:
        """Build the *language* variant of an unprefixed *path*."""
        self._check(language)
        if language == self.default:
            return path
        if path == "/":
            return f"/{language}"
        return f"/{language}{path}"

    def switch(self, path: str, language: str) -> str:
        """Re-localize a (possibly prefixed) *path* into *language*."""
        _, clean = self.split(path)
        return self.localize(clean, language)

    def same_page(self, a: str, b: str) -> bool:
        """Whether *a* and *b* differ at most in their language prefix."""
        return self.split(a)[1] == self.split(b)[1]

    def _check(self, language: str) -> None:
        if language not in self.languages:
            raise UnsupportedLanguageError(language, self.languages)
