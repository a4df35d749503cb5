#!/usr/bin/env python3
"""IPP codec demo: build a Get-Printer-Attributes request and decode a reply.

Without arguments the demo encodes a request, shows its bytes and decodes a
canned response. With ``--url`` the request is POSTed to a real printer
(``http://host:631/ipp/print``) and the reply is decoded instead.
"""

import argparse
import logging

import httpx
from rich.console import Console
from rich.table import Table

from ippwire import (
    Attribute,
    DelimiterTag,
    Enum,
    IppMessage,
    Keyword,
    ListOf,
    NameWithoutLanguage,
    Operation,
    StatusCode,
)

console = Console()


def build_request(printer_uri: str) -> IppMessage:
    request = IppMessage.new_request(Operation.GET_PRINTER_ATTRIBUTES, printer_uri)
    request.attributes.add(
        DelimiterTag.OPERATION_ATTRIBUTES,
        Attribute(
            "requested-attributes",
            ListOf([Keyword("printer-name"), Keyword("printer-state"), Keyword("printer-state-reasons")]),
        ),
    )
    return request


def canned_response(request: IppMessage) -> bytes:
    response = IppMessage.new_response(StatusCode.SUCCESSFUL_OK, request.header.request_id)
    group = DelimiterTag.PRINTER_ATTRIBUTES
    response.attributes.add(group, Attribute("printer-name", NameWithoutLanguage("demo-printer")))
    response.attributes.add(group, Attribute("printer-state", Enum(3)))
    response.attributes.add(group, Attribute("printer-state-reasons", Keyword("none")))
    return response.to_bytes()


def show(message: IppMessage) -> None:
    table = Table(title=f"status/operation {message.header.operation_status:#06x}")
    table.add_column("Group")
    table.add_column("Name")
    table.add_column("Value")
    for group, attributes in message.attributes.groups.items():
        for name, attribute in attributes.items():
            table.add_row(group.name, name, repr(attribute.value))
    console.print(table)


def run_demo(url: str | None) -> None:
    """Run the request/response demo."""
    console.print("IPP Demo - Get-Printer-Attributes")
    console.print("=" * 40)

    printer_uri = url.replace("http://", "ipp://", 1) if url else "ipp://localhost/printers/demo"
    request = build_request(printer_uri)
    data = request.to_bytes()
    console.print(f"Request ({len(data)} bytes): {data.hex()}")

    if url:
        reply = httpx.post(url, content=data, headers={"Content-Type": "application/ipp"}, timeout=10.0)
        reply.raise_for_status()
        body = reply.content
    else:
        body = canned_response(request)

    show(IppMessage.from_bytes(body))


def main():
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--url", help="Printer endpoint, e.g. http://printer:631/ipp/print")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log parser tags")
    args = parser.parse_args()

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)
    run_demo(args.url)


if __name__ == "__main__":
    main()
