"""
Prompt template manager for PaperGen.

Loads and manages prompt templates from the package's prompts/ directory.
Supports variable substitution.
"""

import logging
import re
from pathlib import Path
from typing import Dict, Optional, Any

from papergen.core.exceptions import PromptTemplateError

logger = logging.getLogger(__name__)

PROMPTS_DIR = Path(__file__).resolve().parent.parent / "prompts"
PLACEHOLDER_PATTERN = re.compile(r"\{\{(\w+)\}\}")


class PromptManager:
    """
    Manages prompt templates with variable substitution.

    Features:
    - Load prompts from text files
    - Variable substitution with {{VARIABLE}} syntax
    - Caching so each template is read from disk once

    Example:
        manager = PromptManager()
        prompt = manager.load_prompt(
            "solve_question",
            QUESTION="What is the SI unit of force?",
            SUBJECT_LINE=""
        )
    """

    def __init__(self, prompts_dir: Optional[Path] = None):
        """
        Initialize prompt manager.

        Args:
            prompts_dir: Directory containing prompt template files
        """
        self.prompts_dir = Path(prompts_dir) if prompts_dir else PROMPTS_DIR
        self._cache: Dict[str, str] = {}

        if not self.prompts_dir.exists():
            logger.warning(f"Prompts directory not found: {self.prompts_dir}")

    def load_prompt(self, name: str, **kwargs) -> str:
        """
        Load and format a prompt template.

        Args:
            name: Prompt template name (without .txt extension)
            **kwargs: Variables to substitute in the template

        Returns:
            Formatted prompt string
        """
        template = self._load_template(name)
        return self._substitute_variables(template, kwargs)

    def _load_template(self, name: str) -> str:
        """Load template from cache or file."""
        if name in self._cache:
            return self._cache[name]

        template_file = self.prompts_dir / f"{name}.txt"

        if not template_file.exists():
            raise PromptTemplateError(
                f"Prompt template not found: {template_file}\n"
                f"Available templates: {self.list_templates()}"
            )

        try:
            # Trailing newline of the file is not part of the prompt
            template = template_file.read_text(encoding='utf-8').rstrip("\n")
        except OSError as e:
            raise PromptTemplateError(f"Error loading template {name}: {e}") from e

        self._cache[name] = template
        logger.debug(f"Loaded prompt template: {name}")
        return template

    def _substitute_variables(self, template: str, variables: Dict[str, Any]) -> str:
        """
        Substitute variables in template.

        Variables use {{VARIABLE_NAME}} syntax. Substitution is a single pass
        over the template, so placeholders inside substituted values are left
        as they are.
        """
        unsubstituted = []

        def replace(match: re.Match) -> str:
            key = match.group(1)
            if key in variables:
                return str(variables[key])
            unsubstituted.append(key)
            return match.group(0)

        result = PLACEHOLDER_PATTERN.sub(replace, template)
        if unsubstituted:
            logger.warning(f"Unsubstituted variables in template: {unsubstituted}")

        return result

    def list_templates(self) -> list[str]:
        """List available prompt templates."""
        if not self.prompts_dir.exists():
            return []

        return sorted(f.stem for f in self.prompts_dir.glob("*.txt"))


# Global instance
_prompt_manager: Optional[PromptManager] = None


def get_prompt_manager() -> PromptManager:
    """Get global PromptManager instance (singleton)."""
    global _prompt_manager
    if _prompt_manager is None:
        _prompt_manager = PromptManager()
    return _prompt_manager

