"""
Respondent id generators for bulk insertion.
"""

from typing import Optional, Union


class SequentialIdGenerator:
    """
    Stateful callable producing consecutive respondent ids.

    Each call returns the current counter and advances it by step. With a
    template (e.g. "customer_{}") the counter is formatted into a string id.
    """

    def __init__(self, start: int = 1, step: int = 1, template: Optional[str] = None):
        self.next_value = start
        self.step = step
        self.template = template

    def __call__(self) -> Union[int, str]:
        current = self.next_value
        self.next_value += self.step
        if self.template is not None:
            return self.template.format(current)
        return current
