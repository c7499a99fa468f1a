"""
retro-disasm - Z80 / 6502 逆アセンブラのコマンドラインインターフェース

使用例:
    $ retro-disasm rom.bin -m spectrum48
    $ retro-disasm code.bin -a mos6502 -b 0xC000 -o listing.asm
    $ retro-disasm rom.bin -c project.yaml --decimal
"""
import logging
from dataclasses import replace
from pathlib import Path
from typing import Optional

import click
import yaml

from retro_disasm import __version__
from retro_disasm.config.builder import MACHINES, DisassemblerBuilder
from retro_disasm.config.loader import ConfigLoader, parse_int
from retro_disasm.config.models import ProjectConfig
from retro_disasm.report.listing import ListingFormatter


def _address(value: Optional[str], name: str) -> Optional[int]:
    if value is None:
        return None
    try:
        address = parse_int(value)
    except ValueError:
        raise click.BadParameter(f"Invalid address '{value}'", param_hint=name)
    if not 0 <= address <= 0xFFFF:
        raise click.BadParameter("Address must be 0-65535 (0x0000-0xFFFF)", param_hint=name)
    return address


@click.command()
@click.argument(
    "input_file",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
)
@click.option(
    "-c", "--config",
    "config_file",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="YAML project file (architecture, machine, sections, comments)",
)
@click.option(
    "-a", "--arch",
    type=click.Choice(["z80", "mos6502"], case_sensitive=False),
    default=None,
    help="CPU architecture (default: z80)",
)
@click.option(
    "-m", "--machine",
    type=click.Choice(sorted(name.lower() for name in MACHINES), case_sensitive=False),
    default=None,
    help="Machine specific ROM conventions",
)
@click.option("-b", "--base-address", type=str, default=None, help="Address of the first byte of INPUT_FILE")
@click.option("-s", "--start", type=str, default=None, help="First address to disassemble")
@click.option("-e", "--end", type=str, default=None, help="Last address to disassemble")
@click.option("--decimal", is_flag=True, help="Use decimal numbers in operands")
@click.option("--no-label-prefix", is_flag=True, help="Use $xxxx instead of Lxxxx labels")
@click.option("--extended", is_flag=True, help="Allow ZX Spectrum Next extended instructions")
@click.option("--rom-page", type=int, default=None, help="Active ROM page passed to machine extensions")
@click.option("--bytes/--no-bytes", "show_bytes", default=True, help="Include raw bytes in the listing (default: enabled)")
@click.option(
    "-o", "--output",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Output file (default: stdout)",
)
@click.option("-v", "--verbose", is_flag=True, help="Verbose output")
@click.version_option(version=__version__, prog_name="retro-disasm")
def main(
    input_file: Path,
    config_file: Optional[Path],
    arch: Optional[str],
    machine: Optional[str],
    base_address: Optional[str],
    start: Optional[str],
    end: Optional[str],
    decimal: bool,
    no_label_prefix: bool,
    extended: bool,
    rom_page: Optional[int],
    show_bytes: bool,
    output: Optional[Path],
    verbose: bool,
) -> None:
    """
    Disassemble Z80 or 6502 machine code.

    INPUT_FILE is the binary file to disassemble. Command line options
    override the values of the project file given with --config.
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        config = ConfigLoader().load_from_file(str(config_file)) if config_file else ProjectConfig()
        config = _apply_overrides(
            config,
            arch=arch,
            machine=machine,
            base_address=_address(base_address, "--base-address"),
            start=_address(start, "--start"),
            end=_address(end, "--end"),
            decimal=decimal,
            no_label_prefix=no_label_prefix,
            extended=extended,
            rom_page=rom_page,
        )
        data = input_file.read_bytes()
        if verbose:
            click.echo(f"Input file: {input_file} ({len(data)} bytes)", err=True)
            click.echo(f"Base address: ${config.base_address:04X}", err=True)
        result = DisassemblerBuilder().run(config, data)
    except (ValueError, OSError, yaml.YAMLError) as e:
        raise click.ClickException(str(e))

    if result is None:
        raise click.ClickException(
            f"Nothing to disassemble in ${config.start:04X}-${config.end:04X}")

    label_prefix = "$" if config.options.no_label_prefix else "L"
    text = ListingFormatter(
        show_opcodes=show_bytes, label_prefix=label_prefix, decimal_mode=config.options.decimal_mode,
    ).render(result)

    if output:
        try:
            output.write_text(text, encoding="utf-8")
        except OSError as e:
            raise click.ClickException(f"Error writing {output}: {e}")
        if verbose:
            click.echo(f"Output written to: {output}", err=True)
    else:
        click.echo(text, nl=False)

    if verbose:
        click.echo(f"Items disassembled: {len(result)}", err=True)


# @intent:responsibility コマンドライン引数で指定された値だけをConfigに上書きします。
def _apply_overrides(config: ProjectConfig, **values) -> ProjectConfig:
    if values["arch"]:
        config = replace(config, architecture=values["arch"].upper())
    if values["machine"]:
        config = replace(config, machine=values["machine"].upper())
    for name in ("base_address", "start", "end", "rom_page"):
        if values[name] is not None:
            config = replace(config, **{name: values[name]})

    options = config.options
    if values["decimal"]:
        options = replace(options, decimal_mode=True)
    if values["no_label_prefix"]:
        options = replace(options, no_label_prefix=True)
    if values["extended"]:
        options = replace(options, allow_extended_set=True)
    return replace(config, options=options)


if __name__ == "__main__":
    main()
