# Unless explicitly stated otherwise all files in this repository are licensed under the Apache License Version 2.0.
#
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2024-present Datadog, Inc.

from .cli_configs import Config, LicenseFilePatterns, default_config
from .json_config_parser import JsonConfigParser

__all__ = ["Config", "LicenseFilePatterns", "default_config", "JsonConfigParser"]
