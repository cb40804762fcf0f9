"""The Command Line Interface for the utility, including Interactive elements.

A hybrid CLI/ICLI (Command Line Interface/Interactive Command Line Interface) that generates the INTERACTIVE part
on-the-fly based on the missing components of the CLI interaction, including the option that none are included.

Typical usage example:

    toyrsa demo --p 61 --q 53 --message 65
    OR
    python -m toyrsa
"""
# Copyright (c) 2025-present Tech. TTGames
# SPDX-License-Identifier: EPL-2.0
import argparse
import pathlib
import sys
import typing

import toyrsa
from toyrsa import keystore
from toyrsa import numtheory


class HelpData(typing.NamedTuple):
    description: str
    format: typing.Type = str
    choices: list[str] | None = None
    default: typing.Any = None
    advanced: bool = False


help_dict: dict[str, HelpData] = {
    "subcommand":
        HelpData(
            description="The available subcommands in Toy RSA.",
            choices=["demo", "keygen", "encode", "decode"],
        ),
    "demo":
        HelpData("Generate a key pair, then encode and decode a message with it."),
    "keygen":
        HelpData("Key generation utility."),
    "encode":
        HelpData("Message encoding utility."),
    "decode":
        HelpData("Ciphertext decoding utility."),
    "p":
        HelpData(description="First prime factor.", format=int),
    "q":
        HelpData(description="Second prime factor.", format=int),
    "message":
        HelpData(description="Whole number to encode, 0 < m < n.", format=int),
    "ciphertext":
        HelpData(description="Whole number to decode, 0 <= c < n.", format=int),
    "public_key":
        HelpData(
            description="Location of the public key file.",
            format=pathlib.Path,
            default=pathlib.Path("publickey.txt"),
        ),
    "private_key":
        HelpData(
            description="Location of the private key file.",
            format=pathlib.Path,
            default=pathlib.Path("privatekey.txt"),
        ),
    "key_format":
        HelpData(description="Key file format.", choices=list(keystore.FORMATS), advanced=True, default="text"),
    "legacy_coprime":
        HelpData(
            description="Pick the public exponent with the positional divisor-list check. Warning! May yield keys "
            "with no private exponent.",
            choices=["Y", "N"],
            advanced=True,
            default="N",
        ),
}

needs = {
    "demo": ("p", "q", "public_key", "private_key", "key_format", "legacy_coprime"),
    "keygen": ("p", "q", "public_key", "private_key", "key_format", "legacy_coprime"),
    "encode": ("public_key", "message"),
    "decode": ("public_key", "private_key", "ciphertext"),
}

primes = argparse.ArgumentParser(add_help=False)
primes.add_argument("--p", type=help_dict["p"].format, help=help_dict["p"].description)
primes.add_argument("--q", type=help_dict["q"].format, help=help_dict["q"].description)
primes.add_argument("--format",
                    "-f",
                    dest="key_format",
                    choices=help_dict["key_format"].choices,
                    help=help_dict["key_format"].description)
primes.add_argument("--legacy-coprime",
                    action="store_const",
                    const="Y",
                    help=help_dict["legacy_coprime"].description)
pubkey = argparse.ArgumentParser(add_help=False)
pubkey.add_argument("--public_key", "-k", type=help_dict["public_key"].format, help=help_dict["public_key"].description)
privkey = argparse.ArgumentParser(add_help=False)
privkey.add_argument("--private_key",
                     "-K",
                     type=help_dict["private_key"].format,
                     help=help_dict["private_key"].description)
payloads = argparse.ArgumentParser(add_help=False)
payloads.add_argument("--message", "-m", type=help_dict["message"].format, help=help_dict["message"].description)
corep = argparse.ArgumentParser(prog="toyrsa")
corep.add_argument("--version", "-v", action="version", version=f"%(prog)s {toyrsa.__version__}")
corep.add_argument("--non-interactive", "-n", action="store_true", help="Enable non-interactive mode")
corep.add_argument("--advanced", "-a", action="store_true", help="Enable advanced mode, for interactive mode")
commands = corep.add_subparsers(dest="subcommand", title="Subcommands")

demo = commands.add_parser("demo", parents=[primes, pubkey, privkey, payloads], help=help_dict["demo"].description)
keygen = commands.add_parser("keygen", parents=[primes, pubkey, privkey], help=help_dict["keygen"].description)
encode = commands.add_parser("encode", parents=[pubkey, payloads], help=help_dict["encode"].description)
decode = commands.add_parser("decode", parents=[pubkey, privkey], help=help_dict["decode"].description)
decode.add_argument("--ciphertext",
                    "-c",
                    type=help_dict["ciphertext"].format,
                    help=help_dict["ciphertext"].description)


def checkmodes(arg: str, mode: tuple[bool, bool]):
    helper_data = help_dict[arg]
    if (mode[0] or (helper_data.advanced and not mode[1])) and helper_data.default is not None:
        return helper_data.default
    if mode[0]:
        raise IOError(f"Argument {arg} is missing and non-interactive mode is active.")
    return helper_data


def choice_handler(arg: str, mode: tuple[bool, bool], prntr: typing.Callable = print):
    helper_data = checkmodes(arg, mode)
    if not isinstance(helper_data, HelpData):
        return helper_data
    prntr(f"Please specify the {arg}!")
    prntr("Description: " + helper_data.description)
    choices = helper_data.choices
    vald = set(choices)
    for choice in choices:
        defstring = " (Default)" if choice == helper_data.default else ""
        if help_dict.get(choice, None):
            prntr(f"{choice} - {help_dict[choice].description}" + defstring)
        else:
            prntr(f"{choice}" + defstring)
    if helper_data.default is not None:
        prntr("To accept default just click enter. Otherwise specify value.")
    while True:
        ch = input(f"{arg}: ")
        if ch in vald:
            return ch
        if not ch and helper_data.default is not None:
            return helper_data.default
        prntr("Please select an option from the list.")


def input_handler(arg: str, mode: tuple[bool, bool], prntr: typing.Callable = print):
    helper_data = checkmodes(arg, mode)
    if not isinstance(helper_data, HelpData):
        return helper_data
    prntr(f"Please specify the {arg}!")
    prntr("Description: " + helper_data.description)
    if helper_data.default is not None:
        prntr(f"Default value: {helper_data.default}")
        prntr("To accept default just click enter. Otherwise specify value.")
    cls = helper_data.format
    while True:
        ch = input(f"{arg}: ")
        if not ch and helper_data.default is not None:
            return helper_data.default
        if ch == "":
            prntr("Please provide a value.")
            continue
        try:
            return cls(ch)
        except ValueError:
            prntr(f"We could not convert your value to {cls.__name__}.")


def make_keys(args: argparse.Namespace, pspr: typing.Callable) -> tuple[toyrsa.PublicKey, toyrsa.PrivateKey]:
    """Derive the key pair requested on the command line and store it."""
    coprime = numtheory.are_coprime if args.legacy_coprime == "Y" else numtheory.are_coprime_strict
    try:
        pub, priv = toyrsa.generate_key_pair(args.p, args.q, coprime)
    except (ValueError, RuntimeError) as exc:
        print(f"Key generation failed: {exc}")
        sys.exit(1)
    pspr(f"Public key: n={pub.modulus}, e={pub.exponent}")
    pspr(f"Private key: p={priv.p}, q={priv.q}, d={priv.exponent}")
    for file in (args.public_key, args.private_key):
        if not file.exists():
            pspr(f"Creating {file}...")
    # Private key first, its PEM export fails when p == q.
    keystore.save_private(args.private_key, priv, pub, args.key_format)
    keystore.save_public(args.public_key, pub, args.key_format)
    return pub, priv


def main():
    """Core Hybrid CLI/ICLI (Command Line Interface/Interactive Command Line Interface)"""
    args = corep.parse_args()
    pstatus = (args.non_interactive, args.advanced)

    def pspr(text: str):
        """Print only if not in non-interactive mode."""
        if not pstatus[0]:
            print(text)

    pspr("Welcome to Toy RSA!\n")
    if not args.subcommand:
        args.subcommand = choice_handler("subcommand", pstatus)
    for reqs in needs[args.subcommand]:
        if getattr(args, reqs, None) is None:
            if help_dict[reqs].choices is not None:
                res = choice_handler(reqs, pstatus)
            else:
                res = input_handler(reqs, pstatus)
            setattr(args, reqs, res)
        else:
            pspr(f"{reqs}: {getattr(args, reqs)}")
    pspr("\nInput Complete! Executing...")
    try:
        match args.subcommand:
            case "demo":
                pub, priv = make_keys(args, pspr)
                if getattr(args, "message", None) is None:
                    args.message = input_handler("message", pstatus)
                while not pstatus[0] and not 0 < args.message < pub.modulus:
                    print(f"Message must be in range (0, {pub.modulus}).")
                    args.message = input_handler("message", pstatus)
                c = toyrsa.encode(pub, args.message)
                print(f"Encoded number c: {c}")
                m = toyrsa.decode(pub, priv, c)
                print(f"Decoded number m: {m}")
                if m == args.message:
                    print("Encoding/Decoding successful!")
                else:
                    print("Encoding/Decoding failed.")
                    sys.exit(1)
            case "keygen":
                make_keys(args, pspr)
                pspr("\nKey pair generated!")
            case "encode":
                pub = keystore.load_public(args.public_key)
                c = toyrsa.encode(pub, args.message)
                pspr("Ciphertext:")
                print(c)
            case "decode":
                pub = keystore.load_public(args.public_key)
                priv = keystore.load_private(args.private_key)
                m = toyrsa.decode(pub, priv, args.ciphertext)
                pspr("Message:")
                print(m)
    except ValueError as exc:
        print(f"Invalid input: {exc}")
        sys.exit(1)
    pspr("Thank you for using Toy RSA!")
    pspr("Goodbye!")


if __name__ == "__main__":
    main()
