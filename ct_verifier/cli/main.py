"""
CT Verifier Command Line Interface

Provides commands for verifying inclusion proofs and deriving fingerprints.
"""

import logging
import sys
from typing import Optional

import click

from ct_verifier.api import decode_proof, encode_verdict, evaluate_certificate
from ct_verifier.core.crypto import digest, display_fingerprint, looks_like_fingerprint
from ct_verifier.core.merkle import check_inclusion
from ct_verifier.core.models import Status

# Configure click
CONTEXT_SETTINGS = dict(help_option_names=['-h', '--help'])

LOG_LEVELS = ['DEBUG', 'INFO', 'WARNING', 'ERROR']


# Helper functions
def read_input(source: str) -> bytes:
    """Read raw bytes from a file path, or from stdin when source is '-'."""
    try:
        if source == '-':
            return click.get_binary_stream('stdin').read()
        with open(source, 'rb') as f:
            return f.read()
    except OSError as e:
        click.echo(f"Error reading {source}: {e}", err=True)
        sys.exit(2)


def echo_chain(proof_text: str, fingerprint: str, root: str) -> None:
    """Print the recomputed hash chain for a proof to stderr."""
    proof = decode_proof(proof_text)
    if proof is None:
        click.echo("Hash chain: unavailable (malformed proof)", err=True)
        return
    try:
        check = check_inclusion(proof, fingerprint, root)
    except UnicodeEncodeError:
        click.echo("Hash chain: unavailable (fingerprint is not valid Unicode)", err=True)
        return
    click.echo("Hash chain:", err=True)
    for step, value in enumerate(check.chain):
        click.echo(f"  [{step}] {value}", err=True)
    click.echo(f"Expected root: {check.expected_root}", err=True)


# Command group
@click.group(context_settings=CONTEXT_SETTINGS)
@click.option('--log-level', type=click.Choice(LOG_LEVELS, case_sensitive=False),
              default='WARNING', show_default=True, help='Logging verbosity')
def cli(log_level: str):
    """CT Verifier - check certificate inclusion proofs against a Merkle root."""
    logging.basicConfig(
        level=getattr(logging, log_level.upper()),
        format='%(asctime)s %(levelname)s %(name)s: %(message)s',
    )


@cli.command()
@click.option('--domain', '-d', required=True, help='Domain the certificate was presented for')
@click.option('--fingerprint', '-f', required=True, help='Certificate fingerprint')
@click.option('--proof', '-p', 'proof_file', required=True,
              help="Path to the JSON inclusion proof ('-' for stdin)")
@click.option('--root', '-r', required=True, help='Expected Merkle root hash')
@click.option('--chain', is_flag=True, help='Print the recomputed hash chain to stderr')
def verify(domain: str, fingerprint: str, proof_file: str, root: str, chain: bool):
    """Verify a certificate's Merkle inclusion proof."""
    try:
        proof_text = read_input(proof_file).decode('utf-8')
    except UnicodeDecodeError:
        click.echo("Error: proof file is not valid UTF-8", err=True)
        sys.exit(2)

    verdict = evaluate_certificate(domain, fingerprint, proof_text, root)
    click.echo(encode_verdict(verdict))

    if chain:
        echo_chain(proof_text, fingerprint, root)

    sys.exit(0 if verdict.status == Status.SAFE else 1)


@cli.command()
@click.argument('source', required=False)
@click.option('--text', '-t', help='Fingerprint this text instead of a file')
@click.option('--display', is_flag=True, help='Print the shortened SHA256: display form')
def fingerprint(source: Optional[str], text: Optional[str], display: bool):
    """Compute the fingerprint of certificate data."""
    if text is not None and source is not None:
        click.echo("Give either a file or --text, not both", err=True)
        sys.exit(2)

    if text is not None:
        try:
            value = digest(text)
        except UnicodeEncodeError:
            click.echo("Error: --text is not valid Unicode", err=True)
            sys.exit(2)
    else:
        value = digest(read_input(source or '-'))

    click.echo(display_fingerprint(value) if display else value)


@cli.command('check-format')
@click.argument('value')
def check_format(value: str):
    """Check that a fingerprint has the expected shape."""
    if looks_like_fingerprint(value):
        click.echo("valid")
        sys.exit(0)
    click.echo("invalid", err=True)
    sys.exit(1)


@cli.command()
@click.option('--host', default='127.0.0.1', show_default=True, help='Host to bind to')
@click.option('--port', default=4000, show_default=True, type=int, help='Port to listen on')
@click.option('--debug', is_flag=True, help='Enable debug mode')
def serve(host: str, port: int, debug: bool):
    """Run the local verification service."""
    from ct_verifier.service import run_server

    click.echo(f"Starting verification service on {host}:{port}")
    run_server(host=host, port=port, debug=debug)


# Main entry point
if __name__ == '__main__':
    cli()
