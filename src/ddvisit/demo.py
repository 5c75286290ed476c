"""
Demo: run the sample components through each configured visitor.

With the default configuration this prints:

    Client code works with all visitors via the base Visitor interface:
    A + Visitor1
    B + Visitor1
    It allows the same client code to work with different types of visitors:
    A + Visitor2
    B + Visitor2
"""

import logging
from pathlib import Path
from typing import Annotated, List, Optional, TextIO

import typer

from ddvisit.client import client_code
from ddvisit.config import ConfigError, DemoConfig, load_config
from ddvisit.examples import build_example_components, build_visitor

logger = logging.getLogger(__name__)

app = typer.Typer(
    name="ddvisit-demo",
    help="Run the sample components through each configured visitor.",
    add_completion=False,
)


def run_demo(config: Optional[DemoConfig] = None, stream: Optional[TextIO] = None) -> List[list]:
    """
    Run every configured traversal over one shared component sequence.

    Each traversal gets its own visitor instance. Errors from dispatch are
    not handled: the first UnimplementedOperation ends the demo.

    Returns:
        Handler results per traversal, in configuration order
    """
    config = config or DemoConfig()
    components = build_example_components(config.components)
    logger.info("Running %d traversal(s) over %d component(s)",
                len(config.traversals), len(components))

    results = []
    for traversal in config.traversals:
        print(traversal.banner, file=stream)
        visitor = build_visitor(traversal.visitor, stream=stream)
        results.append(client_code(components, visitor))
    return results


@app.command()
def demo(
    config: Annotated[
        Optional[Path],
        typer.Argument(
            exists=True,
            dir_okay=False,
            readable=True,
            help="YAML demo configuration",
        ),
    ] = None,
):
    """
    Print a banner, then one trace line per component, for each traversal.

    UnimplementedOperation is not caught: a visitor missing a handler
    ends the program abnormally.
    """
    try:
        cfg = load_config(str(config)) if config else DemoConfig()
    except ConfigError as e:
        raise typer.BadParameter(str(e), param_hint="CONFIG")
    logging.basicConfig(level=cfg.log_level)
    run_demo(cfg)


def main():
    """Main entry point for the demo CLI."""
    app()


if __name__ == "__main__":
    main()
