# SPDX-License-Identifier: Apache-2.0
#
# Unless explicitly stated otherwise all files in this repository are licensed under the Apache License Version 2.0.
#
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2024-present Datadog, Inc.

# Main entry point for the license-info-resolver CLI tool

import typer

from license_info_resolver.cli.resolve_license_files_command import (
    resolve_license_files,
)
from license_info_resolver.cli.resolve_license_info_command import (
    resolve_license_info,
)

app = typer.Typer(add_completion=False)
app.command()(resolve_license_info)
app.command()(resolve_license_files)


@app.callback(invoke_without_command=True)
def main(ctx: typer.Context) -> None:
    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        ctx.exit(2)


if __name__ == "__main__":
    app()
