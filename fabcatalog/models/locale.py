from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Locale:
    """
    A dataset source.

    Attributes:
        code: Locale code, also the cache file stem (e.g., "en")
        url_template: Source URL with a {branch} placeholder
    """

    code: str
    url_template: str

    def url(self, branch: str) -> str:
        """Source URL for the given branch or tag."""
        return self.url_template.format(branch=branch)
