from __future__ import annotations

from dataclasses import dataclass

from ghrelease.net.http import HttpClient, RealHttpClient
from ghrelease.output.console import ConsoleProtocol, RichConsole


@dataclass(frozen=True, slots=True)
class CLIContext:
    http: HttpClient
    console: ConsoleProtocol


def build_context() -> CLIContext:
    return CLIContext(http=RealHttpClient(), console=RichConsole())
