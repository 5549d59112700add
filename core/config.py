"""Invoice feature configuration."""

from pydantic import BaseModel, Field


class InvoicesConfig(BaseModel):
    """
    Non-secret settings for the invoice mutation handlers.

    Connection URLs are secrets and come from Vault, not from here.
    """

    # Routing
    listing_path: str = Field(
        default="/dashboard/invoices",
        description="Listing view that is invalidated and redirected to after mutations",
    )
    redirect_status_code: int = Field(
        default=303,
        description="Status code for the post-mutation redirect (303 turns POST into GET)",
        ge=300,
        le=308,
    )

    # View cache
    view_cache_prefix: str = Field(
        default="view:",
        description="Key prefix for cached view renders in Valkey",
        min_length=1,
    )

    # Database pool
    pool_min_connections: int = Field(
        default=2,
        description="Connections kept open in the pool",
        ge=1,
    )
    pool_max_connections: int = Field(
        default=20,
        description="Upper bound on pooled connections",
        ge=1,
        le=200,
    )
    connect_timeout_seconds: int = Field(
        default=30,
        description="Timeout for establishing a new database connection",
        ge=1,
        le=300,
    )
