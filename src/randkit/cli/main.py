"""CLI entry point for randkit."""

from __future__ import annotations

import logging
from pathlib import Path

import click
from pydantic import ValidationError

from randkit.config.defaults import DEFAULT_ALGORITHM, DEFAULT_COUNT
from randkit.config.schema import GeneratorConfig, RunConfig
from randkit.core.factory import build_generator, draw
from randkit.core.verify import verify_reference_vectors
from randkit.generators.registry import GENERATORS, is_cryptographic
from randkit.io.serialize import dump_words, format_word, load_config
from randkit.utils.exceptions import RandkitError


def _parse_seed(value: str | None) -> int | list[int] | None:
    """Parse ``--seed``: comma separated words, decimal or ``0x`` hex."""
    if value is None:
        return None
    try:
        words = [int(part.strip(), 0) for part in value.split(",") if part.strip()]
    except ValueError as exc:
        raise click.BadParameter(f"invalid seed word in {value!r}") from exc
    if not words:
        raise click.BadParameter("seed must contain at least one word")
    return words[0] if len(words) == 1 else words


@click.group()
@click.version_option(package_name="randkit")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging.")
def cli(verbose: bool) -> None:
    """randkit — deterministic 64-bit pseudorandom number generators."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")


@cli.command("list")
def list_generators() -> None:
    """List the available algorithms."""
    for name, cls in GENERATORS.items():
        kind = "CSPRNG" if is_cryptographic(name) else "PRNG"
        click.echo(f"{name:<14} {kind:<7} seed words: {cls.seed_words}")


@cli.command()
@click.option(
    "--config",
    "config_path",
    type=click.Path(exists=True, path_type=Path),
    default=None,
    help="Path to JSON run config. Command-line options override it.",
)
@click.option(
    "--output",
    "output_path",
    type=click.Path(path_type=Path),
    default=None,
    help="Path to write the drawn words as JSON.",
)
@click.option(
    "--algorithm",
    "-a",
    type=click.Choice(sorted(GENERATORS)),
    default=None,
    help=f"Generator algorithm (default {DEFAULT_ALGORITHM}).",
)
@click.option("--seed", default=None, help="Seed words, comma separated. Omit for entropy.")
@click.option("--expand", is_flag=True, help="Expand a single seed word via SplitMix64.")
@click.option("--count", "-n", default=None, type=int, help=f"Words to draw (default {DEFAULT_COUNT}).")
@click.option("--skip", default=None, type=int, help="Words to discard first.")
@click.option("--format", "fmt", type=click.Choice(["dec", "hex"]), default=None)
def generate(
    config_path: Path | None,
    output_path: Path | None,
    algorithm: str | None,
    seed: str | None,
    expand: bool,
    count: int | None,
    skip: int | None,
    fmt: str | None,
) -> None:
    """Draw raw 64-bit words from a generator."""
    try:
        if config_path is not None:
            run_config = load_config(config_path.read_text())
        else:
            run_config = RunConfig(count=DEFAULT_COUNT)

        # CLI overrides
        gen_update: dict[str, object] = {}
        if algorithm is not None:
            gen_update["algorithm"] = algorithm
        if seed is not None:
            gen_update["seed"] = _parse_seed(seed)
        if expand:
            gen_update["seed_mode"] = "expand"
        if gen_update:
            merged = run_config.generator.model_dump() | gen_update
            run_config = run_config.model_copy(
                update={"generator": GeneratorConfig.model_validate(merged)}
            )

        run_update: dict[str, object] = {}
        if count is not None:
            run_update["count"] = count
        if skip is not None:
            run_update["skip"] = skip
        if fmt is not None:
            run_update["output_format"] = fmt
        if run_update:
            run_config = RunConfig.model_validate(run_config.model_dump() | run_update)

        generator = build_generator(run_config.generator)
        words = draw(generator, run_config.count, run_config.skip)
    except (RandkitError, ValidationError) as exc:
        raise click.ClickException(str(exc)) from exc

    if output_path is not None:
        output_path.write_text(
            dump_words(
                run_config.generator.algorithm,
                words,
                run_config.output_format,
                run_config.skip,
            )
        )
        click.echo(f"{len(words)} words written to {output_path}")
        return

    for word in words:
        click.echo(format_word(word, run_config.output_format))


@cli.command()
def verify() -> None:
    """Check every generator against published reference vectors."""
    results = verify_reference_vectors()
    for result in results:
        status = "ok" if result.passed else "FAIL"
        click.echo(f"{status:<5} {result.name} ({result.checked} checks)")
        for position, expected, actual in result.mismatches:
            click.echo(f"      output {position}: expected {expected}, got {actual}")
    if not all(r.passed for r in results):
        raise SystemExit(1)


if __name__ == "__main__":
    cli()
