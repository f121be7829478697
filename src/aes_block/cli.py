"""Command-line interface for the AES block cipher core.

Usage:
    aes-block encrypt --key <hex> --pt <hex32> --verbose
    aes-block encrypt --key <hex> --text "sixteen byte msg" --verify
    aes-block decrypt --key <hex> --ct <hex32> --text-out
    aes-block expand-key --key <hex>
    aes-block validate --n 100 --seed 42
"""

from __future__ import annotations

import json
import random
import secrets
import sys
from typing import TextIO

import click

from . import DEFAULT_CT_HEX, DEFAULT_KEY_HEX, DEFAULT_PT_HEX, __version__
from .cipher import decrypt_block, encrypt_block
from .errors import AESError, InvalidBlockLength
from .interfaces import BlockResult
from .key_schedule import expand_key
from .reference import FIPS_197_TEST_VECTORS, validate_against_reference
from .trace import TraceRecorder, print_header, print_result, print_round_keys
from .utils import BLOCK_SIZE, bytes_to_hex, decode_text, encode_text, hex_to_bytes


def _parse_hex(label: str, value: str) -> bytes:
    try:
        return hex_to_bytes(value)
    except ValueError as e:
        click.echo(f"Error: Invalid {label} hex: {e}", err=True)
        sys.exit(1)


def _run_block(
    direction: str,
    key: bytes,
    block: bytes,
    verbose: bool,
    trace_path: str | None,
    as_json: bool,
    verify: bool,
) -> BlockResult:
    """Expand the key, run one block through the cipher and report it."""
    # Validate before opening the trace file; "w" truncates it
    try:
        schedule = expand_key(key)
        if len(block) != BLOCK_SIZE:
            raise InvalidBlockLength(len(block))
    except AESError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    trace_file: TextIO | None = None
    if trace_path:
        try:
            trace_file = open(trace_path, "w")
        except OSError as e:
            click.echo(f"Error: Cannot open trace file: {e}", err=True)
            sys.exit(1)

    tracer = None
    if verbose or trace_file:
        tracer = TraceRecorder(verbose=verbose and not as_json, trace_file=trace_file)

    try:
        if direction == "encrypt":
            output = encrypt_block(block, schedule, tracer=tracer)
        else:
            output = decrypt_block(block, schedule, tracer=tracer)
    finally:
        if trace_file:
            trace_file.close()

    result = BlockResult(
        direction=direction,
        key_bits=schedule.params.key_bits,
        rounds=schedule.rounds,
        input=block,
        output=output,
    )
    if verify:
        result.verified, result.error_detail = validate_against_reference(
            key, block, output, direction
        )
    if trace_path:
        result.add_note(f"Trace written to {trace_path}")
    return result


def _report(result: BlockResult, as_json: bool, text_out: bool = False) -> None:
    if text_out:
        result.add_note(f"Text: {decode_text(result.output)!r}")

    if as_json:
        click.echo(json.dumps(result.to_dict(), indent=2))
    else:
        label = "Ciphertext" if result.direction == "encrypt" else "Plaintext"
        print_result(label, bytes_to_hex(result.output), result.rounds, result.verified)
        for note in result.notes:
            click.echo(note)
        if result.error_detail:
            click.echo(result.error_detail)

    if result.verified is False:
        sys.exit(1)


@click.group()
@click.version_option(version=__version__, prog_name="aes-block")
def main() -> None:
    """AES (FIPS-197) single-block encryption and decryption.

    Keys may be 16, 24 or 32 bytes; blocks are exactly 16 bytes. No
    padding or mode of operation is applied.
    """
    pass


@main.command()
@click.option("--key", "key_hex", default=DEFAULT_KEY_HEX, show_default=True,
              help="Cipher key as 32, 48 or 64 hex chars")
@click.option("--pt", "pt_hex", default=None,
              help="Plaintext block as 32 hex chars (default: FIPS-197 C.1)")
@click.option("--text", default=None,
              help="Plaintext as UTF-8 text; must encode to exactly 16 bytes")
@click.option("--verbose", "-v", is_flag=True, help="Print the state after every step")
@click.option("--trace", "trace_path", type=click.Path(dir_okay=False), default=None,
              help="Write a JSON Lines trace to this file")
@click.option("--json", "as_json", is_flag=True, help="Print the result as JSON")
@click.option("--verify", is_flag=True, help="Check the result against PyCryptodome")
def encrypt(
    key_hex: str,
    pt_hex: str | None,
    text: str | None,
    verbose: bool,
    trace_path: str | None,
    as_json: bool,
    verify: bool,
) -> None:
    """Encrypt one 16-byte block."""
    if pt_hex is not None and text is not None:
        click.echo("Error: Use either --pt or --text, not both", err=True)
        sys.exit(1)

    key = _parse_hex("key", key_hex)
    if text is not None:
        plaintext = encode_text(text)
    else:
        plaintext = _parse_hex("plaintext", pt_hex if pt_hex is not None else DEFAULT_PT_HEX)

    if not as_json:
        print_header("AES Block Encryption")
        click.echo(f"Key:       {bytes_to_hex(key)}")
        click.echo(f"Plaintext: {bytes_to_hex(plaintext)}")

    result = _run_block("encrypt", key, plaintext, verbose, trace_path, as_json, verify)
    _report(result, as_json)


@main.command()
@click.option("--key", "key_hex", default=DEFAULT_KEY_HEX, show_default=True,
              help="Cipher key as 32, 48 or 64 hex chars")
@click.option("--ct", "ct_hex", default=DEFAULT_CT_HEX, show_default=True,
              help="Ciphertext block as 32 hex chars")
@click.option("--text-out", is_flag=True, help="Also show the plaintext decoded as UTF-8")
@click.option("--verbose", "-v", is_flag=True, help="Print the state after every step")
@click.option("--trace", "trace_path", type=click.Path(dir_okay=False), default=None,
              help="Write a JSON Lines trace to this file")
@click.option("--json", "as_json", is_flag=True, help="Print the result as JSON")
@click.option("--verify", is_flag=True, help="Check the result against PyCryptodome")
def decrypt(
    key_hex: str,
    ct_hex: str,
    text_out: bool,
    verbose: bool,
    trace_path: str | None,
    as_json: bool,
    verify: bool,
) -> None:
    """Decrypt one 16-byte block."""
    key = _parse_hex("key", key_hex)
    ciphertext = _parse_hex("ciphertext", ct_hex)

    if not as_json:
        print_header("AES Block Decryption")
        click.echo(f"Key:        {bytes_to_hex(key)}")
        click.echo(f"Ciphertext: {bytes_to_hex(ciphertext)}")

    result = _run_block("decrypt", key, ciphertext, verbose, trace_path, as_json, verify)
    _report(result, as_json, text_out=text_out)


@main.command(name="expand-key")
@click.option("--key", "key_hex", default=DEFAULT_KEY_HEX, show_default=True,
              help="Cipher key as 32, 48 or 64 hex chars")
def expand_key_cmd(key_hex: str) -> None:
    """Print the round keys derived from a cipher key."""
    key = _parse_hex("key", key_hex)
    try:
        schedule = expand_key(key)
    except AESError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    params = schedule.params
    click.echo(f"AES-{params.key_bits}: Nk={params.nk} Nr={params.nr} "
               f"words={len(schedule)}")
    print_round_keys(schedule)


@main.command()
@click.option("--n", "num_tests", type=int, default=100, show_default=True,
              help="Random round trips per key size")
@click.option("--seed", type=int, default=None, help="Random seed for reproducibility")
@click.option("--verbose", "-v", is_flag=True, help="Show detailed output")
def validate(num_tests: int, seed: int | None, verbose: bool) -> None:
    """Validate against FIPS-197 vectors and PyCryptodome."""
    click.echo("Running FIPS-197 KAT tests...")
    kat_passed = 0

    for vec in FIPS_197_TEST_VECTORS:
        schedule = expand_key(vec["key"])
        ct = encrypt_block(vec["plaintext"], schedule)
        pt = decrypt_block(vec["ciphertext"], schedule)
        if ct == vec["ciphertext"] and pt == vec["plaintext"]:
            kat_passed += 1
            if verbose:
                click.echo(f"  {vec['name']}: PASS")
        else:
            click.echo(f"  {vec['name']}: FAIL - got {ct.hex()}, "
                       f"expected {vec['ciphertext'].hex()}")

    click.echo(f"FIPS-197 tests: {kat_passed}/{len(FIPS_197_TEST_VECTORS)} passed")

    if seed is not None:
        rng = random.Random(seed)

        def random_bytes(n: int) -> bytes:
            return bytes(rng.randint(0, 255) for _ in range(n))
    else:
        random_bytes = secrets.token_bytes

    random_passed = 0
    random_total = 0
    for key_len in (16, 24, 32):
        click.echo(f"\nRunning {num_tests} random tests for AES-{key_len * 8}...")
        passed_here = 0
        for i in range(num_tests):
            key = random_bytes(key_len)
            pt = random_bytes(16)
            schedule = expand_key(key)
            ct = encrypt_block(pt, schedule)

            ok, detail = validate_against_reference(key, pt, ct, "encrypt")
            if ok and decrypt_block(ct, schedule) != pt:
                ok, detail = False, "Round trip did not restore the plaintext"
            if ok:
                passed_here += 1
            elif verbose:
                click.echo(f"  Random test {i+1}: FAIL - {detail}")
        click.echo(f"Random tests: {passed_here}/{num_tests} passed")
        random_passed += passed_here
        random_total += num_tests

    total_passed = kat_passed + random_passed
    total_tests = len(FIPS_197_TEST_VECTORS) + random_total

    click.echo("")
    if total_passed == total_tests:
        click.echo(f"VALIDATION PASSED: All {total_tests} tests passed")
        sys.exit(0)
    else:
        click.echo(f"VALIDATION FAILED: {total_tests - total_passed} failures")
        sys.exit(1)


if __name__ == "__main__":
    main()
