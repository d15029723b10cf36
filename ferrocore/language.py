"""Guessing a file's language from its name."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import PurePath


@dataclass(frozen=True)
class Pattern:
    """A rule matching a file name by suffix or by whole name.

    Suffixes are compared case-sensitively; whole names ignore case.
    """

    text: str
    whole_name: bool = False

    @classmethod
    def suffix(cls, suffix: str) -> Pattern:
        return cls(suffix, whole_name=False)

    @classmethod
    def name(cls, name: str) -> Pattern:
        return cls(name, whole_name=True)

    def matches(self, file: str) -> bool:
        if self.whole_name:
            return self.text.lower() == file.lower()
        return file.endswith(self.text)


_S = Pattern.suffix
_N = Pattern.name

_LANGUAGES: tuple[tuple[Pattern, str], ...] = (
    (_S(".rs"), "rust"),
    (_S(".json"), "json"),
    (_S(".c"), "c"),
    (_S(".h"), "c"),
    (_S(".css"), "css"),
    (_S(".md"), "markdown"),
    (_S(".py"), "python"),
    (_S(".xml"), "xml"),
    (_S(".yaml"), "yaml"),
    (_S(".yml"), "yaml"),
    (_S(".cs"), "c-sharp"),
    (_S(".fish"), "fish"),
    (_S(".js"), "javascript"),
    (_S(".ron"), "ron"),
    (_S(".f"), "fortran"),
    (_S(".zig"), "zig"),
    (_S(".go"), "go"),
    (_S(".ts"), "ts"),
    (_S(".proto"), "protobuf"),
    (_S(".lua"), "lua"),
    (_S(".nu"), "nu"),
    (_N("hyprland.conf"), "hyprlang"),
    (_N("COMMIT_EDITMSG"), "git-commit"),
    (_N("git-rebase-todo"), "git-rebase"),
    (_N("CMakeLists.txt"), "cmake"),
    (_S(".cmake"), "cmake"),
    (_S(".toml"), "toml"),
    (_N("Cargo.lock"), "toml"),
    (_N("Dockerfile"), "dockerfile"),
    (_N("Containerfile"), "dockerfile"),
    (_S(".glsl"), "glsl"),
    (_S(".vert"), "glsl"),
    (_S(".frag"), "glsl"),
    (_S(".html"), "html"),
    (_S(".htm"), "html"),
    (_S(".xhtml"), "html"),
    (_S(".shtml"), "html"),
    (_S(".cpp"), "cpp"),
    (_S(".cc"), "cpp"),
    (_S(".cp"), "cpp"),
    (_S(".cxx"), "cpp"),
    (_S(".c++"), "cpp"),
    (_S(".C"), "cpp"),
    (_S(".h"), "cpp"),
    (_S(".hh"), "cpp"),
    (_S(".hpp"), "cpp"),
    (_S(".hxx"), "cpp"),
    (_S(".h++"), "cpp"),
    (_S(".inl"), "cpp"),
    (_S(".ipp"), "cpp"),
    (_S(".cx"), "cpp"),
    (_S(".tcc"), "cpp"),
    (_S(".sh"), "bash"),
    (_S(".bash"), "bash"),
    (_S(".zsh"), "bash"),
    (_N(".bash_login"), "bash"),
    (_N(".bash_logout"), "bash"),
    (_N(".bash_profile"), "bash"),
    (_N(".bashrc"), "bash"),
    (_N(".profile"), "bash"),
    (_N(".zshenv"), "bash"),
    (_N(".zlogin"), "bash"),
    (_N(".zlogout"), "bash"),
    (_N(".zprofile"), "bash"),
    (_N(".zshrc"), "bash"),
    (_N("PKGBUILD"), "bash"),
    (_S(".ini"), "ini"),
    (_S(".service"), "ini"),
    (_S(".automount"), "ini"),
    (_S(".device"), "ini"),
    (_S(".mount"), "ini"),
    (_S(".path"), "ini"),
    (_S(".slice"), "ini"),
    (_S(".socket"), "ini"),
    (_S(".swap"), "ini"),
    (_S(".target"), "ini"),
    (_S(".timer"), "ini"),
    (_S(".container"), "ini"),
    (_S(".volume"), "ini"),
    (_S(".kube"), "ini"),
    (_S(".network"), "ini"),
    (_S(".properties"), "ini"),
    (_S(".cfg"), "ini"),
    (_S(".directory"), "ini"),
    (_N(".editorconfig"), "ini"),
    (_N("rclone.conf"), "ini"),
)


def get_language_from_path(path: str | os.PathLike) -> str | None:
    """Language name for the file at ``path``, judged by its file name only."""
    file_name = PurePath(os.fspath(path)).name
    if file_name in ("", ".."):
        return None
    return next(
        (language for pattern, language in _LANGUAGES if pattern.matches(file_name)),
        None,
    )