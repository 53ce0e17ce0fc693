"""Profile API Routes

The shop owner's own profile: name, business name and currency.
"""

from fastapi import APIRouter, Depends
from sqlmodel.ext.asyncio.session import AsyncSession

from src.api.error import error_for
from src.api.schemas.ledger_request import ProfileRequestSchema
from src.adapter.repositories.profile_repository import SqlAlchemyProfileRepository
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.app.use_cases.ledger import GetProfile, SaveProfile
from src.depends import get_session
from src.domain.user_profile import UserProfile

router = APIRouter(prefix="/profile", tags=["Profile"])


@router.get("", response_model=UserProfile)
async def get_profile(session: AsyncSession = Depends(get_session)):
    """Stored profile, or the default (empty names, INR) if none was saved."""
    result = await GetProfile(SqlAlchemyProfileRepository(session)).execute()
    return result.value


@router.put("", response_model=UserProfile)
async def save_profile(
    request: ProfileRequestSchema,
    session: AsyncSession = Depends(get_session),
):
    use_case = SaveProfile(SqlAlchemyUnitOfWork(session), SqlAlchemyProfileRepository(session))
    result = await use_case.execute(UserProfile(**request.model_dump()))

    if result.is_err():
        raise error_for(result.error)
    return result.value
