from __future__ import annotations
import json
import logging
import pathlib
from typing import Any, List, Optional

import typer
from pydantic import ValidationError
from rich import print

from merkledrop.api import build_drop, get_proof
from merkledrop.errors import MerkleDropError
from merkledrop.felt import to_hex
from merkledrop.hashing import get_selector_from_name
from merkledrop.logutil import setup_logging
from merkledrop.models import DropFile, MerkleDropResult
from merkledrop.settings import settings
from merkledrop_sdk.verify import verify_proof

app = typer.Typer(add_completion=False, no_args_is_help=True)


@app.callback()
def _main(
    log_level: str = typer.Option(None, help="Override MERKLEDROP_LOG_LEVEL"),
):
    level = (log_level or settings.log_level).upper()
    setup_logging(getattr(logging, level, logging.INFO))


def _read_json(path: str) -> Any:
    try:
        return json.loads(pathlib.Path(path).read_text())
    except json.JSONDecodeError as e:
        raise typer.BadParameter(f"{path} is not valid JSON: {e}")


def _load_claims(path: str) -> tuple[List[Any], DropFile]:
    """Read a JSON list of claims, or a drop file with a ``snapshot`` array."""
    obj = _read_json(path)
    if isinstance(obj, dict):
        try:
            drop = DropFile(**obj)
            claims = drop.claims()
        except (ValidationError, ValueError) as e:
            raise typer.BadParameter(f"{path} is not a valid drop file: {e}")
        return claims, drop
    if isinstance(obj, list):
        return obj, DropFile()
    raise typer.BadParameter("claims file must hold a list or a drop object")


def _out_path(out: Optional[str]) -> pathlib.Path:
    if out:
        return pathlib.Path(out)
    return pathlib.Path(settings.output_dir) / "merkle_drop_proofs.json"


def _write(result: MerkleDropResult, out: Optional[str]) -> None:
    path = _out_path(out)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(result.model_dump(exclude_none=True), indent=2))
    print(f"[green]Merkle root[/green]: {result.merkle_root}")
    print(f"[green]Wrote {result.tree_size} proofs to {path}[/green]")


def _load_result(path: str) -> MerkleDropResult:
    obj = _read_json(path)
    if not isinstance(obj, dict):
        raise typer.BadParameter(f"{path} must hold a build result object")
    try:
        return MerkleDropResult(**obj)
    except ValidationError as e:
        raise typer.BadParameter(f"{path} is not a build result: {e}")


@app.command()
def build(
    claims: str = typer.Option(..., help="JSON claims list or drop file"),
    out: str = typer.Option(None, help="Output JSON path"),
):
    """Build a standard (sorted) tree; the root ignores claim order."""
    rows, _ = _load_claims(claims)
    try:
        result = build_drop(rows)
    except MerkleDropError as e:
        print(f"[red]{e}[/red]")
        raise typer.Exit(code=1)
    _write(result, out)


@app.command()
def build_compat(
    claims: str = typer.Option(..., help="JSON claims list or drop file"),
    claim_contract: str = typer.Option(
        None, help="Claim contract address (defaults to the drop file's)"
    ),
    entrypoint: str = typer.Option(
        None, help="Claim entrypoint name (defaults to MERKLEDROP_ENTRYPOINT)"
    ),
    out: str = typer.Option(None, help="Output JSON path"),
):
    """Build a tree compatible with the reference JS tree builder."""
    rows, drop = _load_claims(claims)
    contract = claim_contract or drop.claim_contract
    if not contract:
        raise typer.BadParameter("--claim-contract is required")
    name = entrypoint or drop.entrypoint or settings.entrypoint
    try:
        result = build_drop(rows, contract, name)
    except MerkleDropError as e:
        print(f"[red]{e}[/red]")
        raise typer.Exit(code=1)
    _write(result, out)


@app.command()
def proof(
    result: str = typer.Option(..., help="Output of build / build-compat"),
    address: str = typer.Option(..., help="Claimant address as listed in the claims"),
):
    """Print the inclusion proof for one address."""
    res = _load_result(result)
    try:
        path = get_proof(res.proofs, address)
    except KeyError:
        print(f"[red]No proof for {address}[/red]")
        raise typer.Exit(code=1)
    print(json.dumps({"address": address, "proof": path}, indent=2))


@app.command()
def verify(
    result: str = typer.Option(..., help="Output of build / build-compat"),
    address: str = typer.Option(..., help="Claimant address as listed in the claims"),
    leaf: str = typer.Option(..., help="Leaf hash (hex)"),
):
    """Check a leaf hash against the stored proof and root."""
    res = _load_result(result)
    try:
        path = get_proof(res.proofs, address)
    except KeyError:
        print(f"[red]No proof for {address}[/red]")
        raise typer.Exit(code=1)
    ok = verify_proof(leaf, path, res.merkle_root)
    print({"proof_valid": ok})
    if not ok:
        raise typer.Exit(code=1)


@app.command()
def selector(name: str):
    """Print the entrypoint selector for a function name."""
    try:
        print(to_hex(get_selector_from_name(name)))
    except MerkleDropError as e:
        print(f"[red]{e}[/red]")
        raise typer.Exit(code=1)


if __name__ == "__main__":
    app()
