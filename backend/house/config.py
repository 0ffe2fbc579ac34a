"""Report text tunables.

The defaults reproduce the canonical report shape::

    Finding report of <description>
    Room: <room>, Device <device report>

Create a custom ``ReportConfig`` to change the header or separator::

    home = SmartHome("Flat", config=ReportConfig(line_separator="\\r\\n"))
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class ReportConfig:
    header_template: str = "Finding report of {description}"
    line_separator: str = "\n"

    def header(self, description: str) -> str:
        return self.header_template.format(description=description)


DEFAULT = ReportConfig()
