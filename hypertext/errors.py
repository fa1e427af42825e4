from __future__ import annotations

from pathlib import Path


class SiteError(Exception):
    pass


class MissingTemplateDeclaration(SiteError):
    def __init__(self, path: Path | str) -> None:
        self.path = str(path)
        super().__init__(f"Missing template metadata in {self.path}")


class TemplateNotFound(SiteError):
    def __init__(self, path: Path | str) -> None:
        self.path = str(path)
        super().__init__(f"Template not found: {self.path}")


class InvalidContent(SiteError):
    def __init__(self, path: Path | str) -> None:
        self.path = str(path)
        super().__init__(f"Invalid Markdown file: {self.path}")


class FileSystemFailure(SiteError):
    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"File system error: {reason}")


class RenderFailure(SiteError):
    def __init__(self, template: Path | str, reason: str) -> None:
        self.template = str(template)
        self.reason = reason
        super().__init__(f"Failed to render {self.template}: {reason}")


class ServerFailure(SiteError):
    def __init__(self, address: str, reason: str) -> None:
        self.address = address
        self.reason = reason
        super().__init__(f"Cannot serve on {address}: {reason}")
