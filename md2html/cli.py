"""
Converts a Markdown document to HTML.
Reads a file or standard input and writes a file or standard output.
"""

from __future__ import annotations

import logging
from pathlib import Path

import click
from .config import ConfigError, Md2HtmlConfig, apply_overrides, build_config
from .converter import ConvertFileError, convert, convert_file
from .exceptions import TemplateError
from .filesystem import get_max_file_size, read_text_file, write_output, write_preview_file

__all__ = ["cli"]

logger = logging.getLogger("md2html")


def _setup_logging(verbose: bool) -> None:
    """Configure logging based on verbosity level."""
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    logger.setLevel(level)


def _convert_stdin(config: Md2HtmlConfig) -> str:
    """Convert Markdown read from standard input using `config`."""
    try:
        logger.debug("Reading Markdown from standard input")
        with click.open_file("-", encoding="UTF-8") as stream:
            markdown = stream.read()

        template_text = None
        if config.template is not None:
            logger.debug("Loading template from %s", config.template)
            template_text = read_text_file(Path(config.template), config.max_file_size)
    except IOError as error:
        raise click.ClickException(str(error)) from error

    try:
        return convert(markdown, template_text, config.title, config)
    except TemplateError as error:
        raise click.ClickException(str(error)) from error


@click.command()
@click.version_option()
@click.option(
    "-i",
    "--input",
    "input_path",
    type=click.Path(exists=True, dir_okay=False),
    help="Input Markdown file (stdin if not specified)",
)
@click.option(
    "-o",
    "--output",
    "output_path",
    type=click.Path(dir_okay=False),
    help="Output HTML file (stdout if not specified)",
)
@click.option(
    "-t",
    "--template",
    "template_path",
    type=click.Path(exists=True, dir_okay=False),
    help="HTML template file with {{ Title }} and {{ Content }} placeholders",
)
@click.option("--title", help="Title for the HTML document")
@click.option("--code-block-class", help="CSS class of the section wrapping code blocks")
@click.option("--preview", is_flag=True, help="Open the generated HTML in a browser")
@click.option("-v", "--verbose", is_flag=True, help="Enable verbose (DEBUG) logging")
def cli(
    input_path: str | None = None,
    output_path: str | None = None,
    template_path: str | None = None,
    title: str | None = None,
    code_block_class: str | None = None,
    preview: bool = False,
    verbose: bool = False,
):
    """
    Entry point for converting Markdown to an HTML document.

    Args:
        input_path: Markdown file to convert; stdin is read when omitted.
        output_path: Destination file; the document goes to stdout when omitted.
        template_path: Page template overriding the configured or built-in one.
        title: Document title overriding the configured one.
        code_block_class: CSS class for code block sections.
        preview: Open the result in the default browser.
        verbose: Enable debug logging.

    Returns:
        None.

    Raises:
        click.BadParameter: If configuration values are invalid.
        click.ClickException: If reading, template rendering, or writing fails.

    Examples:
        md2html -i README.md -o README.html --title "Read me"
        cat notes.md | md2html --preview
    """
    _setup_logging(verbose)

    try:
        config = build_config(
            Path.cwd(),
            title=title,
            template=template_path,
            code_block_class=code_block_class,
        )
    except ConfigError as error:
        raise click.BadParameter(str(error)) from error

    try:
        max_file_size = get_max_file_size(default=config.max_file_size)
    except ValueError as error:
        raise click.ClickException(str(error)) from error
    config = apply_overrides(config, max_file_size=max_file_size)

    if input_path is not None:
        logger.debug("Converting %s", input_path)
        try:
            document = convert_file(Path(input_path), config=config)
        except ConvertFileError as error:
            raise click.ClickException(str(error)) from error
    else:
        document = _convert_stdin(config)

    preview_path: Path | None = None
    try:
        if output_path is not None:
            write_output(Path(output_path), document)
            click.echo(f"HTML written to {output_path}")
            preview_path = Path(output_path)
        else:
            click.echo(document, nl=False)

        if preview:
            if preview_path is None:
                preview_path = write_preview_file(document)
            logger.debug("Opening preview %s", preview_path)
            click.launch(str(preview_path.resolve()))
    except IOError as error:
        raise click.ClickException(str(error)) from error


if __name__ == "__main__":
    cli()
