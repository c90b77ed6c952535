"""HTML renderer: self-contained document written to a file.

The template is a packaged Jinja2 asset, loaded once per process.
It only receives the total count and the warning records.
"""

from __future__ import annotations

import logging
import sys
from functools import lru_cache
from pathlib import Path
from typing import TYPE_CHECKING, TextIO, cast

from jinja2 import Environment, PackageLoader, TemplateError, select_autoescape

from smellreport.application.reporters.strategies import ReportStrategy
from smellreport.domain.exceptions.template import TemplateLoadError
from smellreport.domain.model.smell_warning import warning_record

if TYPE_CHECKING:
    from jinja2 import Template

    from smellreport.application.reporters.report import Report
    from smellreport.domain.model.smell_warning import WarningProtocol

logger = logging.getLogger(__name__)

TEMPLATE_NAME = "html_output.html.jinja"
DEFAULT_OUTPUT_PATH = Path("reek.html")


@lru_cache(maxsize=None)
def load_template(name: str = TEMPLATE_NAME) -> Template:
    """Load template from package assets.

    Cached: the asset is read once per process.

    Raises:
        TemplateLoadError: Asset missing, unreadable, or invalid.
    """
    try:
        env = Environment(
            loader=PackageLoader("smellreport", "assets"),
            autoescape=select_autoescape(enabled_extensions=("html", "jinja")),
            keep_trailing_newline=True,
        )
        return env.get_template(name)
    except (TemplateError, OSError, ValueError) as e:
        raise TemplateLoadError(name, str(e) or type(e).__name__) from e


def render_document(
    template: Template,
    total_smell_count: int,
    smells: list[WarningProtocol],
) -> str:
    """Render the HTML document from the only data it may use."""
    return template.render(
        total_smell_count=total_smell_count,
        smells=[warning_record(w) for w in smells],
    )


class HtmlRenderer:
    """Report saved as an HTML file.

    Overwrites the output file on every show().
    """

    def __init__(
        self,
        path: Path | None = None,
        output: TextIO | None = None,
        *,
        template_name: str = TEMPLATE_NAME,
    ) -> None:
        """Initialize renderer and load the template.

        Args:
            path: Destination file (default: reek.html in working directory)
            output: Stream for the confirmation message (default: sys.stdout)
            template_name: Asset name inside smellreport/assets

        Raises:
            TemplateLoadError: Template cannot be loaded.
        """
        self._path = path if path is not None else DEFAULT_OUTPUT_PATH
        self._output = output if output is not None else sys.stdout
        self._template = load_template(template_name)

    @property
    def path(self) -> Path:
        """Destination file."""
        return self._path

    @property
    def forced_strategy(self) -> ReportStrategy:
        """Template lists raw warnings."""
        return ReportStrategy.FLATTEN_RAW

    def show(self, report: Report) -> None:
        """Write the document, then confirm on the output stream.

        Raises:
            OSError: Destination not writable.
        """
        warnings = cast("list[WarningProtocol]", report.smells())
        document = render_document(self._template, report.total_smell_count, warnings)
        with self._path.open("w", encoding="utf-8") as file:
            file.write(document)
        logger.debug("wrote %d warnings to %s", len(warnings), self._path)
        self._output.write("Html file saved\n")
