"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

utils/convert_utils.py
Size parsing shared by the CLI and the HTTP API.
"""
import math
from typing import Union


class ConvertUtils:
    @staticmethod
    def human_to_bytes(size_str: Union[str, int]) -> int:
        """
        Convert human-readable size string to bytes.
        Supports formats: '1.5GB', '2048KB', '1000', '1K', '1M', '1G', etc.
        Plain integers are passed through.
        Raises ValueError for negative sizes or invalid formats.
        """
        if isinstance(size_str, bool):
            raise ValueError(f"Invalid size value: {size_str!r}")
        if isinstance(size_str, int):
            if size_str < 0:
                raise ValueError(f"Negative size not allowed: '{size_str}'")
            return size_str

        size_str = size_str.strip().upper()
        if not size_str:
            return 0

        # Define units with both full (KB) and short (K) forms
        units = {
            'PB': 1024 ** 5, 'P': 1024 ** 5,
            'TB': 1024 ** 4, 'T': 1024 ** 4,
            'GB': 1024 ** 3, 'G': 1024 ** 3,
            'MB': 1024 ** 2, 'M': 1024 ** 2,
            'KB': 1024, 'K': 1024,
            'B': 1,
        }

        # Check for unit suffix (longest first to avoid 'KB' matching as 'K' + 'B')
        for unit in sorted(units.keys(), key=len, reverse=True):
            if size_str.endswith(unit):
                value_str = size_str[:-len(unit)].strip()
                try:
                    value = float(value_str)
                except ValueError:
                    raise ValueError(f"Invalid numeric value in size: '{value_str}'")

                if value < 0:
                    raise ValueError(f"Negative size not allowed: '{size_str}'")
                size_bytes = value * units[unit]
                if not math.isfinite(size_bytes):
                    raise ValueError(f"Size must be a finite number: '{size_str}'")
                return int(size_bytes)

        # No unit specified — treat as bytes
        try:
            value = int(size_str)
        except ValueError:
            raise ValueError(
                f"Invalid size format: '{size_str}'. "
                f"Supported formats: 1.5GB, 2048KB, 1000, 1K, 1M, etc."
            )

        if value < 0:
            raise ValueError(f"Negative size not allowed: '{size_str}'")
        return value

    @staticmethod
    def is_valid_size_format(size_str: str) -> bool:
        """
        Check if the input string has a valid size format.
        """
        try:
            ConvertUtils.human_to_bytes(size_str)
            return True
        except ValueError:
            return False
