# SPDX-License-Identifier: Apache-2.0
#
# Unless explicitly stated otherwise all files in this repository are licensed under the Apache License Version 2.0.
#
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2026-present Datadog, Inc.

# Command printing the resolved license information of a component

import json
import logging
from dataclasses import replace
from typing import Annotated

import typer

from license_info_resolver.artifact_management.file_archiver import (
    FileArchiver,
    LocalFileArchiver,
)
from license_info_resolver.config.cli_configs import default_config
from license_info_resolver.config.json_config_parser import JsonConfigParser
from license_info_resolver.model.identifier import Identifier, InvalidIdentifier
from license_info_resolver.providers.json_license_info_provider import (
    JsonLicenseInfoProvider,
)
from license_info_resolver.report_generator.writers.json_reporting_writer import (
    JSONReportingWriter,
)
from license_info_resolver.resolver.license_info_resolver import LicenseInfoResolver
from license_info_resolver.utils.logging import LOG_LEVELS, setup_logging


def parse_identifier(coordinates: str) -> Identifier:
    try:
        return Identifier.from_coordinates(coordinates)
    except InvalidIdentifier as e:
        raise typer.BadParameter(str(e))


def log_level_callback(value: str) -> str:
    if value.lower() not in LOG_LEVELS:
        raise typer.BadParameter(
            f"Invalid log level '{value}'. Valid levels: {', '.join(LOG_LEVELS)}"
        )
    return value.lower()


def create_resolver(
    evidence_dir: str,
    copyright_garbage_file: str | None,
    add_authors_to_copyrights: bool,
    archive_dir: str | None = None,
) -> LicenseInfoResolver:
    """Create a resolver reading evidence files, exiting with code 1 on bad input."""
    config = replace(
        default_config, add_authors_to_copyrights=add_authors_to_copyrights
    )
    try:
        if copyright_garbage_file is not None:
            config.preset_copyright_garbage = (
                config.preset_copyright_garbage
                + JsonConfigParser.load_copyright_garbage(copyright_garbage_file)
            )
        provider = JsonLicenseInfoProvider(evidence_dir)
        archiver: FileArchiver | None = None
        if archive_dir is not None:
            archiver = LocalFileArchiver(archive_dir)
    except FileNotFoundError:
        typer.echo(f"Error: File '{copyright_garbage_file}' not found.", err=True)
        raise typer.Exit(code=1)
    except (ValueError, json.JSONDecodeError) as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)

    return LicenseInfoResolver.from_config(provider, config, archiver)


def resolve_license_info(
    coordinates: Annotated[
        str,
        typer.Argument(
            help="The identifier of the component, as 'type:namespace:name:version'."
        ),
    ],
    evidence_dir: Annotated[
        str,
        typer.Option(
            "--evidence-dir",
            help="Directory holding one JSON license evidence file per component.",
        ),
    ],
    copyright_garbage_file: Annotated[
        str | None,
        typer.Option(
            "--copyright-garbage",
            help="JSON file listing copyright statements to ignore, in addition to the preset ones.",
        ),
    ] = None,
    add_authors_to_copyrights: Annotated[
        bool,
        typer.Option(
            "--add-authors-to-copyrights",
            help="Add a copyright statement for each declared author.",
        ),
    ] = False,
    omit_excluded: Annotated[
        bool,
        typer.Option(
            "--omit-excluded",
            help="Omit licenses and copyrights only found in excluded paths.",
        ),
    ] = False,
    log_level: Annotated[
        str,
        typer.Option(
            "--log-level",
            help="Logging level (debug, info, warning, error).",
            callback=log_level_callback,
        ),
    ] = "info",
) -> None:
    """
    Print the resolved license information of a component as JSON.

    Every license of the concluded, declared and detected expressions is listed
    once, with the places it was found and the copyrights attributed to it.
    """
    setup_logging(LOG_LEVELS[log_level])
    id = parse_identifier(coordinates)
    resolver = create_resolver(
        evidence_dir, copyright_garbage_file, add_authors_to_copyrights
    )

    try:
        resolved = resolver.resolve_license_info(id)
    except (ValueError, json.JSONDecodeError) as e:
        logging.error(f"Failed to resolve license info of {id}: {e}")
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)

    if omit_excluded:
        resolved = resolved.filter_excluded()
    typer.echo(JSONReportingWriter().write_license_info(resolved))
