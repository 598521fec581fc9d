"""Ignore rules configuration model."""

from typing import List

from pydantic import BaseModel, Field

DEFAULT_IGNORE_RULES = [
    "package-lock.json",
    "node_modules",
    ".git",
    "build",
    "dist",
]

# Rules offered for toggling, in display order
COMMON_IGNORE_RULES = [
    ".gitignore",
    ".git",
    "build",
    "dist",
    "coverage",
    ".env",
    ".DS_Store",
    ".idea",
    ".vscode",
    "package-lock.json",
    "/node_modules",
    "yarn.lock",
    "package.json",
    "tsconfig.json",
    "tsconfig.build.json",
    "tslint.json",
    ".build.gradle",
    ".gradlew",
    ".gradlew.bat",
    "/gradle",
    ".gradle.properties",
    ".gradle.lockfile",
    ".gradle-wrapper.jar",
    "/build",
    "/target",
    "/assets",
    "/public",
    "/images",
    ".ico",
    "fonts",
    "styles",
    ".lock",
    ".lockfile",
    ".toml",
    ".xml",
    ".png",
    ".svg",
    ".css",
    ".scss",
    ".less",
    ".iml",
    ".md",
    ".example",
]


class IgnoreConfig(BaseModel):
    """Configuration for path filtering.

    Attributes:
        rules: Ignore rules active by default ('.x' suffix, '/x' folder, 'x' name)
    """

    rules: List[str] = Field(default_factory=lambda: list(DEFAULT_IGNORE_RULES))
