"""Feature flags module for centralized feature toggle management."""

from typing import Literal

from pydantic import BaseModel, Field

from educa.config import get_settings


class FeatureFlags(BaseModel):
    """Pydantic model defining all feature flags in the application."""

    user_registrations: bool = Field(..., description="Whether learner registration is enabled")
    certificate_requires_completion: bool = Field(
        ..., description="Whether certificates require 100% progress"
    )


FeatureFlagKey = Literal["user_registrations", "certificate_requires_completion"]


def get_feature_flags() -> FeatureFlags:
    """
    Get current feature flags based on application configuration.

    Returns:
        FeatureFlags instance with current flag values
    """
    settings = get_settings()

    return FeatureFlags(
        user_registrations=settings.ALLOW_USER_REGISTRATIONS,
        certificate_requires_completion=settings.CERTIFICATE_REQUIRES_COMPLETION,
    )


def get_feature_flag(key: FeatureFlagKey) -> bool:
    """Get the value of a specific feature flag."""
    flags = get_feature_flags()
    return getattr(flags, key)


def is_user_registrations_enabled() -> bool:
    """Check if learner registrations are enabled."""
    return get_feature_flag("user_registrations")


def is_certificate_completion_required() -> bool:
    """Check if certificates are only issued at 100% progress."""
    return get_feature_flag("certificate_requires_completion")
