"""Command line tool for inspecting MMS PDUs, P2P triggers and compat tiers."""
# Example:
# python -m mms_cli.main --action compat --platform-version 23

from __future__ import annotations

import json
import sys
from argparse import (
    ArgumentDefaultsHelpFormatter,
    ArgumentParser,
    RawDescriptionHelpFormatter,
)
from dataclasses import asdict
from typing import Any, Dict

from mms_compat import (
    get_feature_flags,
    get_mms_operation_timeout,
    get_receiving_strategy,
    get_sending_strategy,
    is_sms_manager_mms_api_available,
    needs_reflection_access,
)
from mms_pdu import EncodedStringValue, GenericPdu, PduFormatError, decode_pdu, header_name, message_type_name
from mms_shared.config import load_config, log_level, operation_timeout_override, platform_version
from mms_shared.logging_config import configure_logging, log
from p2p_handshake import P2PConnectionData, P2PParseError, extract_encrypted_payload


# Combine both formatters to allow newlines and showing default arguments
class RawDescriptionDefaultsHelpFormatter(
    RawDescriptionHelpFormatter,
    ArgumentDefaultsHelpFormatter,
):
    pass


def _render_value(value: Any) -> Any:
    if isinstance(value, list):
        return [_render_value(item) for item in value]
    if isinstance(value, EncodedStringValue):
        return value.string
    if isinstance(value, bytes):
        return value.decode("utf-8", errors="replace")
    return value


def summarize_pdu(pdu: GenericPdu) -> Dict[str, Any]:
    """Return a JSON-friendly view of a decoded PDU.

    Args:
        pdu: Any decoded PDU variant.

    Returns:
        dict: Message type, header values keyed by header name, and body parts.
    """
    summary: Dict[str, Any] = {
        "pdu": type(pdu).__name__,
        "message_type": message_type_name(pdu.message_type),
        "headers": {header_name(code): _render_value(value) for code, value in pdu.headers.items()},
    }
    body = getattr(pdu, "body", None)
    if body is not None:
        summary["parts"] = [
            {
                "content_type": part.content_type,
                "name": part.name,
                "size": len(part.data or b""),
            }
            for part in body
        ]
    return summary


def main(argv: list[str] | None = None) -> int:
    """CLI entrypoint.

    Args:
        argv: Optional list of arguments (defaults to ``sys.argv``).

    Returns:
        int: Process exit code (0 on success, non-zero on error or rejection).
    """
    parser = ArgumentParser(
        description="Inspect MMS PDUs and P2P handshake messages.\n\n"
                    "decode      print a hex encoded PDU as JSON\n"
                    "trigger     validate a P2P trigger and print its payload\n"
                    "compat      show strategies, feature flags and timeout for a platform version\n"
                    "descriptor  validate a P2P connection descriptor JSON",
        formatter_class=RawDescriptionDefaultsHelpFormatter,
    )
    parser.add_argument(
        "--action",
        choices=["decode", "trigger", "compat", "descriptor"],
        help="Action to execute",
    )
    parser.add_argument("--config", default=None, help="Path to config.yaml")
    parser.add_argument("--log-level", default=None, help="Log level (overrides LOG_LEVEL and config)")
    parser.add_argument("--hex", default=None, help="Hex encoded PDU (decode)")
    parser.add_argument("--message", default=None, help="Text message body (trigger)")
    parser.add_argument("--json", dest="json_text", default=None, help="Connection descriptor JSON (descriptor)")
    parser.add_argument(
        "--platform-version",
        type=int,
        default=None,
        help="Platform version ordinal (compat); defaults to the configured value",
    )

    args = parser.parse_args(argv)

    cfg = load_config(args.config)
    configure_logging(args.log_level or log_level(cfg), stream=sys.stderr)
    log.debug("Handling action: %s", args.action)

    if args.action == "decode":
        if not args.hex:
            sys.stderr.write("--hex is required for decode\n")
            return 1
        try:
            pdu = decode_pdu(bytes.fromhex(args.hex))
        except ValueError as exc:
            # PduFormatError subclasses ValueError, like bytes.fromhex errors
            kind = "PDU" if isinstance(exc, PduFormatError) else "hex input"
            sys.stderr.write(f"Invalid {kind}: {exc}\n")
            return 1
        print(json.dumps(summarize_pdu(pdu), indent=2))
        return 0

    if args.action == "trigger":
        payload = extract_encrypted_payload(args.message)
        print(json.dumps({"valid": payload is not None, "payload": payload}, indent=2))
        return 0 if payload is not None else 1

    if args.action == "compat":
        version = args.platform_version if args.platform_version is not None else platform_version(cfg)
        flags = get_feature_flags(version)
        report = {
            "platform_version": version,
            "sending_strategy": get_sending_strategy(version).strategy_name,
            "receiving_strategy": get_receiving_strategy(version).strategy_name,
            "sms_manager_mms_api": is_sms_manager_mms_api_available(version),
            "needs_reflection_access": needs_reflection_access(version),
            "operation_timeout_ms": get_mms_operation_timeout(version, operation_timeout_override(cfg)),
            "feature_flags": asdict(flags),
        }
        print(json.dumps(report, indent=2))
        return 0

    if args.action == "descriptor":
        try:
            data = P2PConnectionData.from_json(args.json_text)
        except P2PParseError as exc:
            sys.stderr.write(f"{exc}\n")
            return 1
        report = {
            "descriptor": data.to_dict(),
            "valid": data.is_valid(),
            "fresh": data.is_fresh(),
        }
        print(json.dumps(report, indent=2))
        return 0 if data.is_valid() else 1

    # No action selected, show help
    parser.print_help()
    return 1


if __name__ == "__main__":
    sys.exit(main())
