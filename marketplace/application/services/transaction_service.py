"""
Transaction service orchestrator.

Payment intent creation and purchase fulfillment. Fulfillment writes the
transaction, the initial progress record and the enrollment one after the
other; a failure part-way leaves the earlier writes in place. A payment is
accepted once: a recorded transactionId cannot be fulfilled again.

Dependencies: marketplace.boundary, marketplace.core
System role: Purchase use case orchestration
"""

import logging

from marketplace.boundary.db.repositories import (
    CourseRepository,
    ProgressRepository,
    TransactionRepository,
)
from marketplace.boundary.payments import PaymentIntentSummary, StripePaymentGateway
from marketplace.core.exceptions import NotFoundError, PaymentVerificationError
from marketplace.core.progress import build_initial_sections
from marketplace.core.timestamps import utc_now_iso
from marketplace.models.course import Course
from marketplace.models.progress import UserCourseProgress
from marketplace.models.transaction import (
    CreateTransactionRequest,
    PurchaseResult,
    Transaction,
)

logger = logging.getLogger(__name__)


class TransactionService:
    """Transaction service orchestrator."""

    def __init__(
        self,
        courses: CourseRepository,
        transactions: TransactionRepository,
        progress: ProgressRepository,
        payments: StripePaymentGateway,
        verify_payments: bool = True,
        default_amount: int = 50,
        currency: str = "usd",
    ) -> None:
        """
        Args:
            courses: Courses table repository
            transactions: Transactions table repository
            progress: UserCourseProgress table repository
            payments: Stripe gateway
            verify_payments: Require a succeeded PaymentIntent before fulfillment
            default_amount: Intent amount used when the client sends none
            currency: Currency a verified PaymentIntent must be in
        """
        self.courses = courses
        self.transactions = transactions
        self.progress = progress
        self.payments = payments
        self.verify_payments = verify_payments
        self.default_amount = default_amount
        self.currency = currency

    async def list_transactions(self, user_id: str | None = None) -> list[Transaction]:
        """List a user's transactions, or every transaction when user_id is None."""
        if user_id:
            return await self.transactions.list_by_user(user_id)
        return await self.transactions.list_all()
    async def create_payment_intent(
        self,
        amount: int | None,
        user_id: str,
        course_id: str | None = None,
    ) -> str:
        """
        Create a Stripe PaymentIntent tagged with the buyer (and course).

        When course_id is given the course price is charged and the client
        amount is ignored.

        Args:
            amount: Minor units; missing or non-positive falls back to default_amount
            user_id: Authenticated buyer, stored in the intent metadata
            course_id: Course being bought, stored in the intent metadata

        Returns:
            str: Client secret

        Raises:
            NotFoundError: course_id given but the course does not exist
        """
        metadata = {"userId": user_id}
        if course_id:
            course = await self.courses.get(course_id)
            if course is None:
                raise NotFoundError("Course not found", resource="course", resource_id=course_id)
            amount = course.price
            metadata["courseId"] = course_id

        if not amount or amount <= 0:
            amount = self.default_amount
        return await self.payments.create_payment_intent(amount, metadata=metadata)

    async def create_transaction(self, request: CreateTransactionRequest) -> PurchaseResult:
        """
        Fulfill a purchase.

        Steps: fetch course, reject an already recorded transactionId, verify
        payment (optional), record transaction, initialize progress, enroll.
        Nothing is written when any check before the first write fails.
        Stored progress of a returning buyer is kept as it is.

        Returns:
            PurchaseResult: Stored transaction and the buyer's progress

        Raises:
            NotFoundError: Course does not exist
            PaymentVerificationError: Payment reused or not matching the course
        """
        log_context = {
            "user_id": request.user_id,
            "course_id": request.course_id,
            "transaction_id": request.transaction_id,
        }

        course = await self.courses.get(request.course_id)
        if course is None:
            logger.warning("Purchase for unknown course", extra=log_context)
            raise NotFoundError("Course not found", resource="course", resource_id=request.course_id)

        if await self.transactions.get(request.transaction_id) is not None:
            logger.warning("Transaction id already recorded", extra=log_context)
            raise PaymentVerificationError("Payment already used", request.transaction_id)

        if self.verify_payments:
            await self._verify_payment(request, course)

        now = utc_now_iso()
        transaction = Transaction(
            user_id=request.user_id,
            transaction_id=request.transaction_id,
            date_time=now,
            course_id=request.course_id,
            payment_provider=request.payment_provider,
            amount=request.amount,
        )
        await self.transactions.put(transaction)
        logger.info("Transaction recorded", extra=log_context)

        course_progress = await self.progress.get(request.user_id, request.course_id)
        if course_progress is None:
            course_progress = UserCourseProgress(
                user_id=request.user_id,
                course_id=request.course_id,
                enrollment_date=now,
                overall_progress=0.0,
                sections=build_initial_sections(course),
                last_accessed_timestamp=now,
            )
            await self.progress.put(course_progress)
            logger.info("Initial course progress stored", extra=log_context)
        else:
            logger.info("Existing course progress kept", extra=log_context)

        if course.is_enrolled(request.user_id):
            logger.info("User already enrolled, enrollment unchanged", extra=log_context)
        else:
            await self.courses.append_enrollment(request.course_id, request.user_id)
            logger.info("User enrolled in course", extra=log_context)

        return PurchaseResult(transaction=transaction, course_progress=course_progress)

    async def _verify_payment(self, request: CreateTransactionRequest, course: Course) -> None:
        intent = await self.payments.retrieve_payment_intent(request.transaction_id)
        if intent is None or not self._intent_pays_for(intent, request, course):
            logger.warning(
                "Payment verification failed",
                extra={
                    "transaction_id": request.transaction_id,
                    "intent_status": intent.status if intent else None,
                    "intent_amount": intent.amount if intent else None,
                    "intent_currency": intent.currency if intent else None,
                    "course_price": course.price,
                    "requested_amount": request.amount,
                },
            )
            raise PaymentVerificationError("Payment not verified", request.transaction_id)

    def _intent_pays_for(
        self,
        intent: PaymentIntentSummary,
        request: CreateTransactionRequest,
        course: Course,
    ) -> bool:
        """A succeeded intent for the course price, in our currency, tagged for this buyer and course."""
        metadata = intent.metadata
        return (
            intent.succeeded
            and intent.amount == course.price
            and intent.amount == request.amount
            and intent.currency.lower() == self.currency.lower()
            and metadata.get("userId", request.user_id) == request.user_id
            and metadata.get("courseId", request.course_id) == request.course_id
        )
