#!/usr/bin/env python3
# --------------------------------------------------------------
# File: cli.py
# Description: Línea de comandos para cifrar assets durante el build.
# --------------------------------------------------------------
"""
Herramienta de build para empaquetar modelos 3D cifrados.

Uso:
    python -m assetpack.cli keygen
    python -m assetpack.cli encrypt --input public/model.glb --output public/model.enc
    python -m assetpack.cli decrypt --input public/model.enc --output /tmp/model.glb
"""

import argparse
import logging
import sys
from typing import List, Optional

from assetpack import config
from assetpack.errors import AssetPackError
from assetpack.keys import generate_key, key_to_hex
from assetpack.packager import package_file
from assetpack.storage import write_bytes_atomic
from assetpack.unpackager import unpackage_file

logger = logging.getLogger(__name__)


def _cmd_keygen(args: argparse.Namespace) -> int:
    key = generate_key()
    print("IMPORTANT: You need this KEY to decrypt the file.")
    print(f"Add it to the {config.KEY_ENV} environment variable or your .env file:")
    print("")
    print("KEY_START")
    print(key_to_hex(key))
    print("KEY_END")
    return 0


def _cmd_encrypt(args: argparse.Namespace) -> int:
    key = config.load_key(args.key_env)
    print("Encrypting...")
    result = package_file(args.input, args.output, key)
    print("Encryption complete!")
    print(f"Input: {result.input_path} ({result.plaintext_size} bytes)")
    print(f"Output: {result.output_path} ({result.packaged_size} bytes)")
    return 0


def _cmd_decrypt(args: argparse.Namespace) -> int:
    key = config.load_key(args.key_env)
    plaintext = unpackage_file(args.input, key)
    write_bytes_atomic(plaintext, args.output)
    print(f"Decrypted {args.input} -> {args.output} ({len(plaintext)} bytes)")
    return 0


def build_parser() -> argparse.ArgumentParser:
    """Construye el parser de argumentos con sus tres subcomandos."""

    parser = argparse.ArgumentParser(prog="assetpack", description="Encrypt and decrypt packaged 3D assets")
    parser.add_argument("--log-level", default=config.LOG_LEVEL, help="Logging level (default: %(default)s)")
    subparsers = parser.add_subparsers(dest="command", required=True)

    keygen = subparsers.add_parser("keygen", help="Generate a new 256-bit key")
    keygen.set_defaults(func=_cmd_keygen)

    encrypt = subparsers.add_parser("encrypt", help="Package a plaintext asset")
    encrypt.add_argument("--input", "-i", default=config.ASSET_INPUT, help="Plaintext asset path")
    encrypt.add_argument("--output", "-o", default=config.ASSET_OUTPUT, help="Packaged file path")
    encrypt.add_argument("--key-env", default=config.KEY_ENV, help="Environment variable holding the hex key")
    encrypt.set_defaults(func=_cmd_encrypt)

    decrypt = subparsers.add_parser("decrypt", help="Verify and decrypt a packaged asset")
    decrypt.add_argument("--input", "-i", default=config.ASSET_OUTPUT, help="Packaged file path")
    decrypt.add_argument("--output", "-o", required=True, help="Destination for the plaintext asset")
    decrypt.add_argument("--key-env", default=config.KEY_ENV, help="Environment variable holding the hex key")
    decrypt.set_defaults(func=_cmd_decrypt)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, str(args.log_level).upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        return args.func(args)
    except (AssetPackError, OSError, ValueError) as exc:
        # Los mensajes de error nunca incluyen la clave ni el contenido.
        print(f"Error: {exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
