"""Topology checks for cluster subnets and availability zones."""

from __future__ import annotations

MULTI_AZ_ZONES = 3


def validate_subnets_count(multi_az: bool, private_link: bool, count: int) -> None:
    """Raise ``ValueError`` unless ``count`` fits the cluster topology."""

    if multi_az:
        if private_link and count != 3:
            raise ValueError(
                "The number of subnets for a multi-AZ private link cluster should be 3, "
                f"instead received: {count}"
            )
        if not private_link and count != 6:
            raise ValueError(
                "The number of subnets for a multi-AZ cluster should be 6, "
                f"instead received: {count}"
            )
    else:
        if private_link and count != 1:
            raise ValueError(
                "The number of subnets for a single AZ private link cluster should be 1, "
                f"instead received: {count}"
            )
        if not private_link and count != 2:
            raise ValueError(
                "The number of subnets for a single AZ cluster should be 2, "
                f"instead received: {count}"
            )


def validate_availability_zones_count(multi_az: bool, count: int) -> None:
    if multi_az and count != MULTI_AZ_ZONES:
        raise ValueError(
            "The number of availability zones for a multi AZ cluster should be "
            f"{MULTI_AZ_ZONES}, instead received: {count}"
        )
    if not multi_az and count != 1:
        raise ValueError(
            "The number of availability zones for a single AZ cluster should be 1, "
            f"instead received: {count}"
        )
