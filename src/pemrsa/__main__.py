"""The Command Line Interface for the adapter.

Exposes signing, verification, encryption and decryption over key files. Key files may hold either a bare base64
body or a complete PEM file, and messages may be read from file by prefixing their path with `P:`.

Typical usage example:

    pemrsa sign -P private.key --message "Hi there!"
    OR
    python -m pemrsa encrypt -p public.key --message P:payload.txt -e hex
"""
# Copyright (c) 2025-present Tech. TTGames
# SPDX-License-Identifier: EPL-2.0
import argparse
import logging
import pathlib
import sys
import typing

import pemrsa


class HelpData(typing.NamedTuple):
    description: str
    format: typing.Type = str
    choices: list[str] | None = None
    default: typing.Any = None


help_dict: dict[str, HelpData] = {
    "sign":
        HelpData("Signing utility."),
    "verify":
        HelpData("Signature verification utility."),
    "encrypt":
        HelpData("Encryption utility."),
    "decrypt":
        HelpData("Decryption utility."),
    "public_key":
        HelpData(
            description="Location of the public key file, bare body or PEM.",
            format=pathlib.Path,
        ),
    "private_key":
        HelpData(
            description="Location of the unencrypted private key file, bare body or PEM.",
            format=pathlib.Path,
        ),
    "style":
        HelpData(description="Private key format.", choices=["rsa", "pkcs8"], default="rsa"),
    "message":
        HelpData(
            description="Message or path to file containing payload. If Path start with `P:`",
            format=str,
        ),
    "encoding":
        HelpData(description="Signature/ciphertext encoding.", choices=["base64", "hex", "bin"], default="base64"),
    "charset":
        HelpData(description="Payload encoding.", choices=["utf-8", "utf-16", "ascii"], default="utf-8"),
    "padding":
        HelpData(description="Decryption padding.", choices=["pkcs1", "none"], default="pkcs1"),
    "reverse":
        HelpData(description="Reverse the decrypted block and strip its trailing NUL bytes (CryptoAPI)."),
    "signature":
        HelpData(
            description="The signature to validate against the payload and public key. If Path start with `P:`",
            format=str,
        ),
}

pubkey = argparse.ArgumentParser(add_help=False)
pubkey.add_argument("--public_key",
                    "-p",
                    required=True,
                    type=help_dict["public_key"].format,
                    help=help_dict["public_key"].description)
privkey = argparse.ArgumentParser(add_help=False)
privkey.add_argument("--private_key",
                     "-P",
                     required=True,
                     type=help_dict["private_key"].format,
                     help=help_dict["private_key"].description)
privkey.add_argument("--style",
                     choices=help_dict["style"].choices,
                     default=help_dict["style"].default,
                     help=help_dict["style"].description)
payloads = argparse.ArgumentParser(add_help=False)
payloads.add_argument("--message",
                      "-m",
                      required=True,
                      type=help_dict["message"].format,
                      help=help_dict["message"].description)
payloads.add_argument("--charset",
                      "-c",
                      choices=help_dict["charset"].choices,
                      default=help_dict["charset"].default,
                      help=help_dict["charset"].description)
encp = argparse.ArgumentParser(add_help=False)
encp.add_argument("--encoding",
                  "-e",
                  choices=help_dict["encoding"].choices,
                  default=help_dict["encoding"].default,
                  help=help_dict["encoding"].description)
corep = argparse.ArgumentParser(prog="pemrsa")
corep.add_argument("--version", "-v", action="version", version=f"%(prog)s {pemrsa.__version__}")
corep.add_argument("--verbose", "-V", action="store_true", help="Enable debug logging")
commands = corep.add_subparsers(dest="subcommand", title="Subcommands", required=True)

sign = commands.add_parser("sign", parents=[privkey, payloads, encp], help=help_dict["sign"].description)
verify = commands.add_parser("verify", parents=[pubkey, payloads, encp], help=help_dict["verify"].description)
verify.add_argument("--signature",
                    "-S",
                    required=True,
                    type=help_dict["signature"].format,
                    help=help_dict["signature"].description)
encrypt = commands.add_parser("encrypt", parents=[pubkey, payloads, encp], help=help_dict["encrypt"].description)
decrypt = commands.add_parser("decrypt", parents=[privkey, payloads, encp], help=help_dict["decrypt"].description)
decrypt.add_argument("--padding",
                     choices=help_dict["padding"].choices,
                     default=help_dict["padding"].default,
                     help=help_dict["padding"].description)
decrypt.add_argument("--reverse", "-r", action="store_true", help=help_dict["reverse"].description)


def check_message(mess: str, enc: str) -> str:
    """Parse message for path-notice."""
    if mess.startswith("P:"):
        mess = mess[2:]
        with open(mess, "r", encoding=enc) as f:
            mess = f.read()
    return mess


def check_encoded(mess: str, encoding: str) -> str | bytes:
    """Parse a ciphertext or signature for path-notice, reading the file untouched for binary encoding."""
    if not mess.startswith("P:"):
        return mess
    with open(mess[2:], "rb") as f:
        data = f.read()
    return data if encoding == "bin" else data.strip()


def fail(text: str) -> typing.NoReturn:
    """Prints the error to stderr and exits with status 1."""
    print(text, file=sys.stderr)
    sys.exit(1)


def emit(payload: str | bytes) -> None:
    """Prints text as-is and writes raw bytes to the binary stdout."""
    if isinstance(payload, bytes):
        sys.stdout.buffer.write(payload)
        sys.stdout.buffer.flush()
    else:
        print(payload)


def load_adapter(args: argparse.Namespace) -> pemrsa.RsaAdapter:
    """Builds the adapter from whichever key file the subcommand takes."""
    ra = pemrsa.RsaAdapter()
    try:
        if getattr(args, "public_key", None) is not None:
            ra.set_public_key(pemrsa.read_key_body(args.public_key))
        if getattr(args, "private_key", None) is not None:
            ra.set_private_key(pemrsa.read_key_body(args.private_key), args.style)
    except ValueError as exc:
        fail(f"Key import failed: {exc}")
    return ra


def main(argv: list[str] | None = None) -> None:
    """Core Command Line Interface."""
    args = corep.parse_args(argv)
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")
    ra = load_adapter(args)
    match args.subcommand:
        case "sign":
            message = check_message(args.message, args.charset)
            signature = ra.sign(message.encode(args.charset), args.encoding)
            if signature is False:
                fail("Signing Failed!")
            emit(signature)
        case "verify":
            message = check_message(args.message, args.charset)
            signature = check_encoded(args.signature, args.encoding)
            if not ra.verify(message.encode(args.charset), signature, args.encoding):
                fail("Signature Verification Failed!")
            print("Signature Verified!")
        case "encrypt":
            message = check_message(args.message, args.charset)
            ciph = ra.encrypt(message.encode(args.charset), args.encoding)
            if ciph is False:
                fail("Encryption Failed!")
            emit(ciph)
        case "decrypt":
            message = check_encoded(args.message, args.encoding)
            clear = ra.decrypt(message, args.encoding, args.padding, args.reverse)
            if clear is False:
                fail("Decryption Failed!")
            print(clear.decode(args.charset, errors="backslashreplace"))


if __name__ == "__main__":
    main()
