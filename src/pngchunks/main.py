from pathlib import Path

import typer
from loguru import logger
from rich.console import Console
from rich.table import Table
from rich.traceback import install

from .chunk import ChunkType
from .iterator import PngChunkIter
from .log import set_logging

console = Console()
install(show_locals=True)

app = typer.Typer()


# e.g. "bKGD" -> "a---", "tEXt" -> "a--s"
def _flags(chunk_type: ChunkType) -> str:
    return "".join(
        letter if is_set else "-"
        for letter, is_set in (
            ("a", chunk_type.is_ancillary()),
            ("p", chunk_type.is_private()),
            ("r", chunk_type.is_reserved()),
            ("s", chunk_type.is_safe_to_copy()),
        )
    )


@app.command()
def run(
    file: Path = typer.Argument(
        ...,
        help="PNG file to inspect",
        exists=True,
        file_okay=True,
        dir_okay=False,
        readable=True,
    ),
    logging: bool = typer.Option(False, "-l", "--logging", help="Enable logging"),
    verify: bool = typer.Option(
        True, "--verify/--no-verify", help="Fail if a chunk's CRC does not match the declared one"
    ),
) -> None:
    set_logging(logging)

    try:
        data = file.read_bytes()
    except OSError as e:
        console.print(f"[bold red]Unexpected error:[/] {e}")
        raise typer.Exit(1)

    chunks = PngChunkIter.from_png_bytes(data)
    if chunks is None:
        logger.error(f"{file.name} is not a PNG image")
        raise typer.Exit(1)

    table = Table(title=file.name)
    table.add_column("#", justify="right")
    table.add_column("Type")
    table.add_column("Length", justify="right")
    table.add_column("Declared CRC")
    table.add_column("Actual CRC")
    table.add_column("Flags")
    table.add_column("Status")

    corrupted = 0
    for i, chunk in enumerate(chunks):
        actual_crc = chunk.actual_crc()
        if actual_crc == chunk.declared_crc:
            status = "[green]OK[/]"
        else:
            corrupted += 1
            status = "[bold red]BAD[/]"
            logger.error(
                f'Invalid CRC for chunk "{chunk.chunk_type}" (expected: {hex(chunk.declared_crc)}, actual: {hex(actual_crc)})'
            )
        table.add_row(
            str(i),
            str(chunk.chunk_type),
            str(chunk.length),
            f"{chunk.declared_crc:08x}",
            f"{actual_crc:08x}",
            _flags(chunk.chunk_type),
            status,
        )
        logger.info(f"Chunk {i}: {chunk}")

    console.print(table)

    if len(chunks.remaining) > 0:
        console.print(
            f"[yellow]Warning:[/] {len(chunks.remaining)} bytes after the last chunk could not be read as a chunk"
        )

    if verify and corrupted > 0:
        console.print(f"[bold red]{corrupted} chunk(s) with an invalid CRC[/]")
        raise typer.Exit(1)


def main() -> None:
    app()


if __name__ == "__main__":
    main()
