"""
Transaction API endpoints.

Routes:
- GET /transactions - List transactions (optional ?userId=)
- POST /transactions/payment-intent - Create Stripe PaymentIntent
- POST /transactions/stripe/payment-intent - Same, path used by the checkout page
- POST /transactions - Fulfill a purchase

Dependencies: marketplace.application.services, marketplace.models
System role: Purchase HTTP API
"""

import logging

from fastapi import APIRouter, Depends, Query

from marketplace.api.deps import (
    get_current_user_id,
    get_transaction_service,
    require_same_user,
)
from marketplace.api.errors import handle_api_errors
from marketplace.application.services import TransactionService
from marketplace.models.common import ApiResponse
from marketplace.models.transaction import (
    CreateTransactionRequest,
    PaymentIntentRequest,
    PaymentIntentResponse,
    PurchaseResult,
    Transaction,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/transactions", tags=["transactions"])


@router.get("", response_model=ApiResponse[list[Transaction]], response_model_exclude_none=True)
@handle_api_errors("Error retrieving transactions")
async def list_transactions(
    user_id: str | None = Query(None, alias="userId"),
    current_user_id: str = Depends(get_current_user_id),
    transaction_service: TransactionService = Depends(get_transaction_service),
) -> ApiResponse[list[Transaction]]:
    """
    List transactions of the caller (userId) or of everyone.

    Raises:
        HTTPException(403): userId is not the caller
    """
    if user_id:
        require_same_user(user_id, current_user_id)

    transactions = await transaction_service.list_transactions(user_id)

    logger.info(
        "Transactions retrieved",
        extra={"user_id": user_id, "count": len(transactions), "requested_by": current_user_id},
    )
    return ApiResponse(message="Transactions retrieved successfully", data=transactions)


@router.post(
    "/payment-intent",
    response_model=ApiResponse[PaymentIntentResponse],
    response_model_exclude_none=True,
)
@router.post(
    "/stripe/payment-intent",
    response_model=ApiResponse[PaymentIntentResponse],
    response_model_exclude_none=True,
    include_in_schema=False,
)
@handle_api_errors("Error creating stripe payment intent")
async def create_payment_intent(
    request: PaymentIntentRequest,
    current_user_id: str = Depends(get_current_user_id),
    transaction_service: TransactionService = Depends(get_transaction_service),
) -> ApiResponse[PaymentIntentResponse]:
    """
    Create a PaymentIntent tagged with the caller and return its client secret.

    Raises:
        HTTPException(404): courseId given but unknown
        HTTPException(500): Stripe rejected the request
    """
    client_secret = await transaction_service.create_payment_intent(
        request.amount,
        user_id=current_user_id,
        course_id=request.course_id,
    )
    return ApiResponse(
        message="Payment intent created successfully",
        data=PaymentIntentResponse(client_secret=client_secret),
    )


@router.post("", response_model=ApiResponse[PurchaseResult], response_model_exclude_none=True)
@handle_api_errors("Error creating transaction and enrollment")
async def create_transaction(
    request: CreateTransactionRequest,
    current_user_id: str = Depends(get_current_user_id),
    transaction_service: TransactionService = Depends(get_transaction_service),
) -> ApiResponse[PurchaseResult]:
    """
    Fulfill a purchase: record transaction, create progress, enroll.

    Raises:
        HTTPException(400): Payment not verified
        HTTPException(403): userId is not the caller
        HTTPException(404): Course not found
        HTTPException(500): A write failed (earlier writes are kept)
    """
    require_same_user(request.user_id, current_user_id)

    logger.info(
        "Fulfilling purchase",
        extra={"user_id": request.user_id, "course_id": request.course_id},
    )

    result = await transaction_service.create_transaction(request)
    return ApiResponse(message="Purchased Course successfully", data=result)
