"""Discovery and parsing of SKILL.md skill definitions."""

from __future__ import annotations

import copy
import logging
import re
import threading
from collections.abc import Iterable
from dataclasses import dataclass, field
from pathlib import Path
from typing import ClassVar, Optional, Union

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]

MAX_NAME_LENGTH = 64
MAX_DESCRIPTION_LENGTH = 1024
SKILL_FILE_NAME = "SKILL.md"

_NAME_PATTERN = re.compile(r"[a-z0-9]+(?:-[a-z0-9]+)*")
_TRIM_CHARS = " \t\r\n"

_PROJECT_SKILL_DIRS = (
    ".agent-sdk/skills",
    ".agents/skills",
    ".claude/skills",
    ".opencode/skills",
)


class SkillParseError(Exception):
    """Raised when a SKILL.md file cannot be read or is invalid."""


@dataclass
class SkillInfo:
    """A parsed SKILL.md file."""

    name: str
    description: str
    body: str = ""
    license: Optional[str] = None
    compatibility: Optional[str] = None
    metadata: dict[str, str] = field(default_factory=dict)
    source_path: Path = field(default_factory=Path)


def validate_skill_name(name: str) -> bool:
    """Return True if *name* is 1-64 lowercase alphanumerics joined by single hyphens."""
    if not name or len(name) > MAX_NAME_LENGTH:
        return False
    return _NAME_PATTERN.fullmatch(name) is not None


def _split_frontmatter(content: str) -> tuple[str, str]:
    """Split content into (frontmatter, body); frontmatter is empty if absent."""
    if not content.startswith("---"):
        return "", content

    end_pos = content.find("\n---", 3)
    if end_pos == -1:
        return "", content

    fm_start = 4 if len(content) > 3 and content[3] == "\n" else 3
    if end_pos >= fm_start:
        frontmatter = content[fm_start:end_pos]
    else:
        frontmatter = content[fm_start:]

    body_start = end_pos + 4
    if body_start < len(content) and content[body_start] == "\n":
        body_start += 1
    return frontmatter, content[body_start:]


def _unquote(value: str) -> str:
    if len(value) >= 2 and value[0] == value[-1] and value[0] in "\"'":
        return value[1:-1]
    return value


def _parse_flat_yaml(yaml_text: str) -> dict[str, str]:
    """Parse simple ``key: value`` lines; not a full YAML parser."""
    result: dict[str, str] = {}
    for line in yaml_text.split("\n"):
        if not line or line.startswith("#"):
            continue
        key, sep, value = line.partition(":")
        if not sep:
            continue
        result[key.strip(_TRIM_CHARS)] = _unquote(value.strip(_TRIM_CHARS))
    return result


def _parse_metadata_block(yaml_text: str) -> dict[str, str]:
    """Collect the indented ``key: value`` entries under a ``metadata:`` line."""
    result: dict[str, str] = {}
    in_metadata = False
    for line in yaml_text.split("\n"):
        trimmed = line.lstrip(" \t") or line
        if trimmed in ("metadata:", "metadata: "):
            in_metadata = True
            continue
        if not in_metadata:
            continue
        if not line or line[0] not in " \t":
            in_metadata = False
            continue
        key, sep, value = line.partition(":")
        if not sep:
            continue
        key = key.strip(_TRIM_CHARS)
        if key:
            result[key] = value.strip(_TRIM_CHARS)
    return result


def parse_skill_file(path: PathLike) -> SkillInfo:
    """Parse and validate a SKILL.md file, raising SkillParseError on failure."""
    path = Path(path)
    try:
        content = path.read_text(encoding="utf-8", errors="replace")
    except OSError as exc:
        raise SkillParseError(f"Cannot open file: {path}") from exc

    frontmatter, body = _split_frontmatter(content)
    if not frontmatter:
        raise SkillParseError(f"Missing YAML frontmatter in: {path}")

    fields = _parse_flat_yaml(frontmatter)

    name = fields.get("name", "")
    if not name:
        raise SkillParseError(f"Missing required 'name' field in: {path}")

    description = fields.get("description", "")
    if not description:
        raise SkillParseError(f"Missing required 'description' field in: {path}")

    if not validate_skill_name(name):
        raise SkillParseError(f"Invalid skill name '{name}' in: {path}")

    parent_dir = path.parent.name
    if parent_dir != name:
        raise SkillParseError(
            f"Skill name '{name}' does not match directory '{parent_dir}' in: {path}"
        )

    if len(description.encode("utf-8")) > MAX_DESCRIPTION_LENGTH:
        raise SkillParseError(
            f"Description exceeds {MAX_DESCRIPTION_LENGTH} characters in: {path}"
        )

    return SkillInfo(
        name=name,
        description=description,
        body=body,
        license=fields.get("license"),
        compatibility=fields.get("compatibility"),
        metadata=_parse_metadata_block(frontmatter),
        source_path=path.resolve(strict=True),
    )


def _find_git_root(start: Path) -> Optional[Path]:
    for candidate in (start, *start.parents):
        if (candidate / ".git").exists():
            return candidate
    return None


def _global_skill_dirs() -> list[Path]:
    home = Path.home()
    return [
        home / ".config" / "agent-sdk" / "skills",
        home / ".agents" / "skills",
        home / ".claude" / "skills",
        home / ".config" / "opencode" / "skills",
    ]


class SkillRegistry:
    """Registry of discovered skills; the first skill seen under a name wins."""

    _instance: ClassVar[Optional["SkillRegistry"]] = None
    _instance_lock: ClassVar[threading.Lock] = threading.Lock()

    def __init__(self) -> None:
        self._lock = threading.RLock()
        self._skills: dict[str, SkillInfo] = {}

    @classmethod
    def instance(cls) -> "SkillRegistry":
        """Return the process-wide registry."""
        with cls._instance_lock:
            if cls._instance is None:
                cls._instance = cls()
            return cls._instance

    def _register(self, skill: SkillInfo) -> None:
        existing = self._skills.get(skill.name)
        if existing is not None:
            logger.debug(
                "Skill '%s' already registered (from %s), skipping duplicate from %s",
                skill.name,
                existing.source_path,
                skill.source_path,
            )
            return
        logger.info("Registered skill '%s' from %s", skill.name, skill.source_path)
        self._skills[skill.name] = skill

    def _scan_skills_dir(self, skills_dir: Path) -> None:
        if not skills_dir.is_dir():
            return
        try:
            entries = sorted(skills_dir.iterdir())
        except OSError:
            return
        for entry in entries:
            if not entry.is_dir():
                continue
            skill_md = entry / SKILL_FILE_NAME
            if not skill_md.exists():
                continue
            try:
                skill = parse_skill_file(skill_md)
            except SkillParseError as exc:
                logger.warning("Failed to load skill from %s: %s", skill_md, exc)
                continue
            self._register(skill)

    def discover(self, start_dir: PathLike, extra_paths: Iterable[PathLike] = ()) -> None:
        """Scan project, global and extra skill directories.

        Project directories are searched from *start_dir* upwards, stopping at
        the git root if there is one, otherwise at the filesystem root.
        """
        with self._lock:
            start = Path(start_dir).absolute()
            git_root = _find_git_root(start)

            current = start
            while True:
                for rel in _PROJECT_SKILL_DIRS:
                    self._scan_skills_dir(current / rel)
                if git_root is not None and current == git_root:
                    break
                parent = current.parent
                if parent == current:
                    break
                current = parent

            for directory in _global_skill_dirs():
                self._scan_skills_dir(directory)

            for extra in extra_paths:
                self._scan_skills_dir(Path(extra))

            logger.info(
                "Skill discovery complete: %d skills registered", len(self._skills)
            )

    def get(self, name: str) -> Optional[SkillInfo]:
        """Return a copy of the named skill, or None."""
        with self._lock:
            skill = self._skills.get(name)
            return copy.deepcopy(skill) if skill is not None else None

    def all(self) -> list[SkillInfo]:
        """Return copies of all skills, ordered by name."""
        with self._lock:
            return [copy.deepcopy(self._skills[name]) for name in sorted(self._skills)]

    def size(self) -> int:
        """Return the number of registered skills."""
        with self._lock:
            return len(self._skills)

    def __len__(self) -> int:
        return self.size()

    def clear(self) -> None:
        """Remove all registered skills."""
        with self._lock:
            self._skills.clear()