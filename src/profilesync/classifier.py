"""
Configuration classifier.

Maps a catalog path fragment to the category label used to group the
migration report.
"""

from __future__ import annotations

from typing import Callable, List, Tuple

GENERAL = "General"


def _contains(*needles: str) -> Callable[[str], bool]:
    return lambda path: any(needle in path for needle in needles)


# First match wins. "vscode" and "intellij" must stay ahead of the generic
# editor/tool substrings.
CATEGORY_RULES: List[Tuple[Callable[[str], bool], str]] = [
    (_contains("vscode"), "IDE"),
    (_contains("intellij"), "IDE"),
    (_contains("vim"), "Editor"),
    (_contains("emacs"), "Editor"),
    (_contains("bash", "zsh"), "Shell"),
    (_contains("tmux"), "Terminal"),
    (_contains("git"), "Version Control"),
    (_contains("ssh"), "Security"),
    (_contains("chrome", "firefox"), "Browser"),
    (_contains("npm", "yarn"), "Package Manager"),
    (_contains("pip"), "Package Manager"),
    (_contains("docker"), "Container"),
    (_contains("kubectl"), "Kubernetes"),
    (_contains("helm"), "Kubernetes"),
    (_contains("terraform"), "Infrastructure"),
    (_contains("aws"), "Cloud"),
]


def classify(fragment: str) -> str:
    """Return the category label for a path fragment."""
    for matches, label in CATEGORY_RULES:
        if matches(fragment):
            return label
    return GENERAL


def categories() -> List[str]:
    """Distinct category labels in rule order, ending with the fallback."""
    labels: List[str] = []
    for _, label in CATEGORY_RULES:
        if label not in labels:
            labels.append(label)
    labels.append(GENERAL)
    return labels
