"""Login as customer admin endpoints."""

from typing import Annotated, Any

from fastapi import APIRouter, Depends, Query, Request

from src.login_as_customer.api.dependencies import (
    AuditServiceDep,
    LoginAsCustomerServiceDep,
    require_resource,
)
from src.login_as_customer.models import AdminUser
from src.login_as_customer.schemas import AuditLogRead, LoginAsCustomerResponse
from src.login_as_customer.services.login_as_customer_service import MAX_ENTITY_ID

# ACL resource guarding the audit log listing
LOGIN_AS_CUSTOMER_LOG_RESOURCE = "login_as_customer.log"

router = APIRouter(prefix="/admin/login-as-customer", tags=["login-as-customer"])


async def _request_params(request: Request) -> dict[str, Any]:
    """Merge query string and form body parameters (form wins)."""
    params: dict[str, Any] = dict(request.query_params)
    content_type = request.headers.get("content-type", "")
    if content_type.startswith(("application/x-www-form-urlencoded", "multipart/form-data")):
        form = await request.form()
        params.update({key: value for key, value in form.items() if isinstance(value, str)})
    return params


@router.post(
    "/login",
    response_model=LoginAsCustomerResponse,
    summary="Login as customer",
    description=(
        "Validate that the admin may log in as the customer, issue a one-time secret "
        "and return the storefront URL that opens a session as that customer. "
        "Validation problems are reported in `messages` with `redirectUrl` set to null."
    ),
    responses={
        200: {
            "description": "Either a redirect URL or the reasons the login was refused",
            "content": {
                "application/json": {
                    "examples": {
                        "success": {
                            "value": {
                                "redirectUrl": "https://shop.test/loginascustomer/login/index"
                                "?secret=Zk3...&_nosid=1",
                                "messages": [],
                            }
                        },
                        "customer_not_found": {
                            "value": {
                                "redirectUrl": None,
                                "messages": ["Customer with this ID no longer exists."],
                            }
                        },
                        "store_not_selected": {
                            "value": {
                                "redirectUrl": None,
                                "messages": ["Please select a Store View to login in."],
                            }
                        },
                    }
                }
            },
        },
        400: {"description": "Store view could not be resolved"},
        401: {"description": "Not authenticated"},
        403: {"description": "Not allowed to log in as customers"},
    },
)
async def login_as_customer(
    service: LoginAsCustomerServiceDep,
    params: Annotated[dict[str, Any], Depends(_request_params)],
) -> LoginAsCustomerResponse:
    """Start a login-as-customer session.

    Reads `customer_id` (or `entity_id`) and, when manual store choice is
    enabled, `store_id` from the query string or form body.
    """
    return await service.handle(params)


@router.get(
    "/log",
    response_model=list[AuditLogRead],
    summary="Login as customer log",
    description="Recent login-as-customer sessions started for a customer, newest first.",
    responses={
        401: {"description": "Not authenticated"},
        403: {"description": "Not allowed to view the log"},
    },
)
async def list_login_log(
    _admin: Annotated[AdminUser, Depends(require_resource(LOGIN_AS_CUSTOMER_LOG_RESOURCE))],
    audit_service: AuditServiceDep,
    customer_id: Annotated[
        int, Query(ge=1, le=MAX_ENTITY_ID, description="Customer to list sessions for")
    ],
    limit: Annotated[int, Query(ge=1, le=200, description="Maximum number of entries")] = 50,
) -> list[AuditLogRead]:
    """List the login-as-customer audit log for a customer."""
    logs = await audit_service.list_for_customer(customer_id, limit)
    return [AuditLogRead.model_validate(entry) for entry in logs]
