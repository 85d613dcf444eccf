# SPDX-License-Identifier: Apache-2.0
#
# Unless explicitly stated otherwise all files in this repository are licensed under the Apache License Version 2.0.
#
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2026-present Datadog, Inc.

# Command printing the license files of a component

import json
import logging
from typing import Annotated

import typer

from license_info_resolver.cli.resolve_license_info_command import (
    create_resolver,
    log_level_callback,
    parse_identifier,
)
from license_info_resolver.report_generator.writers.json_reporting_writer import (
    JSONReportingWriter,
)
from license_info_resolver.utils.logging import LOG_LEVELS, setup_logging


def resolve_license_files(
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
    archive_dir: Annotated[
        str,
        typer.Option(
            "--archive-dir",
            help="Directory holding the archived source files of the provenances.",
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
    Print the license files of a component as JSON.

    License files are extracted from the archived sources of each provenance of
    the component. The extracted files are deleted when the command exits.
    """
    setup_logging(LOG_LEVELS[log_level])
    id = parse_identifier(coordinates)
    resolver = create_resolver(
        evidence_dir, copyright_garbage_file, add_authors_to_copyrights, archive_dir
    )

    try:
        resolved = resolver.resolve_license_files(id)
    except (ValueError, json.JSONDecodeError) as e:
        logging.error(f"Failed to resolve license files of {id}: {e}")
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)

    if omit_excluded:
        resolved = resolved.filter_excluded()
    typer.echo(JSONReportingWriter().write_license_files(resolved))
