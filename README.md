# agentskills

Find and load agent skills. A skill is a directory holding a `SKILL.md` file.
The file opens with a small YAML-style frontmatter block, and the Markdown body
follows it:

```markdown
---
name: git-release
description: Create consistent releases
license: MIT
metadata:
  audience: developers
---
## What I do
- Draft release notes
```

## Rules for a skill

- `name` is required. It is 1–64 characters: lowercase letters and digits,
  with single hyphens between them. It must be the same as the name of the
  directory that holds the file.
- `description` is required and may be at most 1024 characters long.
- `license` and `compatibility` are optional.
- `metadata` is an optional block of indented `key: value` pairs.

## Parsing a single file

```python
from agentskills.skill import parse_skill_file, SkillParseError, validate_skill_name

validate_skill_name("git-release")   # True
validate_skill_name("double--dash")  # False

try:
    skill = parse_skill_file("skills/git-release/SKILL.md")
except SkillParseError as err:
    print("cannot load:", err)
else:
    print(skill.name, skill.description, skill.license, skill.metadata)
    print(skill.body)
```

`parse_skill_file` returns a `SkillInfo` on success. It raises
`SkillParseError` when the file cannot be read, has no frontmatter, lacks a
required field, has an invalid name, has a name that differs from its
directory, or has a description that is too long.

## Discovering skills

`SkillRegistry.instance()` returns a registry shared by the whole process.
`discover(start_dir, extra_paths)` walks up from `start_dir` and stops at the
git root, or at the filesystem root if there is no git root. In each
directory it passes through it looks in these places:

- `.agent-sdk/skills/`
- `.agents/skills/`
- `.claude/skills/`
- `.opencode/skills/`

It then looks in the global locations under your home directory:

- `~/.config/agent-sdk/skills/`
- `~/.agents/skills/`
- `~/.claude/skills/`
- `~/.config/opencode/skills/`

Last, it looks in any extra directories you pass in.

```python
from agentskills.skill import SkillRegistry

registry = SkillRegistry.instance()
registry.discover(".", ["/opt/team-skills"])

print(registry.size())
for skill in registry.all():
    print(skill.name, "-", skill.description)

release = registry.get("git-release")   # SkillInfo or None
registry.clear()
```

If two skills have the same name, the first one found is kept. Files that
cannot be parsed are logged as warnings and skipped.