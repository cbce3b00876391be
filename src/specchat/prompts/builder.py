"""Explanation request builder.

Turns a subject and an optional follow-up action into the single prompt
string sent to the completion service.
"""

import re

from .models import FollowUpAction, PromptTemplate, Subject

_PLACEHOLDER = re.compile(r"\{(title|detail_text|action)\}")


def _fill(template: str, **values: str) -> str:
    # Single pass, so braces inside substituted text are never expanded
    return _PLACEHOLDER.sub(
        lambda match: values.get(match.group(1), match.group(0)), template
    )


class ExplanationRequestBuilder:
    """Builds explanation prompts from clause templates.

    Templates are resolved once at construction; :meth:`build` itself is a
    pure function of its arguments.
    """

    def __init__(self, template: PromptTemplate | None = None):
        """Initialize the builder.

        Args:
            template: Clause templates (None loads the packaged defaults)
        """
        self._template = template or PromptTemplate.default()

    @property
    def template(self) -> PromptTemplate:
        return self._template

    def build(
        self,
        subject: Subject,
        action: FollowUpAction | str | None = None,
    ) -> str:
        """Build the prompt for a subject.

        The prompt is the preamble, the subject clause, the follow-up
        clause (only when ``action`` is given) and the output-format clause,
        joined by the template separator.

        Args:
            subject: Specification to explain
            action: Optional follow-up action or its label

        Returns:
            Prompt string

        Raises:
            ValueError: If ``action`` is not a known follow-up label
        """
        template = self._template

        if subject.detail_text.strip():
            subject_clause = _fill(
                template.subject,
                title=subject.title,
                detail_text=subject.detail_text,
            )
        else:
            subject_clause = _fill(template.subject_title_only, title=subject.title)

        clauses = [template.preamble, subject_clause]

        if action is not None:
            label = FollowUpAction(action).value
            clauses.append(_fill(template.follow_up, action=label))

        clauses.append(template.output_format)
        return template.separator.join(clauses)


def build_explanation_request(
    subject: Subject,
    action: FollowUpAction | str | None = None,
) -> str:
    """Build a prompt with the default templates."""
    return ExplanationRequestBuilder().build(subject, action)
