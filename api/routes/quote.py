from typing import Annotated

from fastapi import APIRouter, Depends

from api.dependencies import get_quote_service
from api.schemas import QuoteResponse
from application.services import QuoteService

router = APIRouter(prefix='/api', tags=['quote'])


@router.get('/quote', response_model=QuoteResponse, summary='A random quote')
async def get_quote(
	service: Annotated[QuoteService, Depends(get_quote_service)],
) -> QuoteResponse:
	quote = service.random_quote()
	return QuoteResponse(quote={'text': quote.text, 'author': quote.author})
