"""Tests for CLI."""

from __future__ import annotations

import json
from pathlib import Path

from click.testing import CliRunner

from randkit.cli.main import cli
from randkit.config.schema import GeneratorConfig, RunConfig
from randkit.io.serialize import dump_config


class TestCLI:
    def test_version(self) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["--version"])
        assert result.exit_code == 0
        assert "version" in result.output

    def test_list(self) -> None:
        result = CliRunner().invoke(cli, ["list"])
        assert result.exit_code == 0
        assert "isaac64" in result.output
        assert "CSPRNG" in result.output
        assert "seed words: 256" in result.output

    def test_generate_with_seed(self) -> None:
        result = CliRunner().invoke(
            cli, ["generate", "-a", "mt19937-64", "--seed", "5489", "-n", "1"]
        )
        assert result.exit_code == 0
        assert result.output.strip() == "14514284786278117030"

    def test_generate_xoshiro_hex_seed(self) -> None:
        result = CliRunner().invoke(
            cli,
            ["generate", "-a", "xoshiro256**", "--seed", "0x1,2,3,4", "-n", "3", "--format", "hex"],
        )
        assert result.exit_code == 0
        assert result.output.split() == [
            "0x0000000000002d00",
            "0x0000000000000000",
            "0x000000005a007080",
        ]

    def test_generate_skip(self) -> None:
        result = CliRunner().invoke(
            cli, ["generate", "-a", "xoshiro256**", "--seed", "1,2,3,4", "-n", "1", "--skip", "3"]
        )
        assert result.exit_code == 0
        assert result.output.strip() == "1215971899390074240"

    def test_generate_entropy_seeded(self) -> None:
        result = CliRunner().invoke(cli, ["generate", "-a", "isaac64", "-n", "4"])
        assert result.exit_code == 0
        assert len(result.output.split()) == 4

    def test_generate_bad_seed_length(self) -> None:
        result = CliRunner().invoke(cli, ["generate", "-a", "xoshiro256**", "--seed", "1,2"])
        assert result.exit_code != 0
        assert "4 word" in result.output

    def test_generate_bad_seed_word(self) -> None:
        result = CliRunner().invoke(cli, ["generate", "--seed", "abc"])
        assert result.exit_code != 0

    def test_generate_from_config(self, tmp_path: Path) -> None:
        config = RunConfig(
            generator=GeneratorConfig(algorithm="splitmix64", seed=0),
            count=2,
        )
        config_path = tmp_path / "run.json"
        config_path.write_text(dump_config(config))
        output_file = tmp_path / "out.json"

        result = CliRunner().invoke(
            cli, ["generate", "--config", str(config_path), "--output", str(output_file)]
        )
        assert result.exit_code == 0
        data = json.loads(output_file.read_text())
        assert data["words"] == [16294208416658607535, 7960286522194355700]

    def test_cli_overrides_config(self, tmp_path: Path) -> None:
        config_path = tmp_path / "run.json"
        config_path.write_text(
            dump_config(RunConfig(generator=GeneratorConfig(algorithm="splitmix64", seed=0)))
        )
        result = CliRunner().invoke(cli, ["generate", "--config", str(config_path), "-n", "1"])
        assert result.exit_code == 0
        assert result.output.strip() == "16294208416658607535"

    def test_verify(self) -> None:
        result = CliRunner().invoke(cli, ["verify"])
        assert result.exit_code == 0
        assert "FAIL" not in result.output
        assert "mt19937-64-seed-5489" in result.output
        assert "isaac64-zero-seed" in result.output
