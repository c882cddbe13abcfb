import logging
from fastapi import APIRouter
from partshop.schemas.assistant import DescribeRequest
from partshop.schemas.inventory import SECTION_LABELS
from partshop.schemas.response import SuccessResponse
from partshop.services.assistant import generate_item_details

log = logging.getLogger("uvicorn")
logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(name)s - %(levelname)s - %(message)s')

router = APIRouter()


@router.post("/describe", response_model=SuccessResponse)
async def describe_item_endpoint(payload: DescribeRequest):
    """
    Drafts a description for a part. The assistant is optional: when it cannot
    help, the response is still a success with data set to null.
    """
    result = await generate_item_details(payload.item_name, SECTION_LABELS[payload.section])
    if result is None:
        log.info(f"No description suggestion available for '{payload.item_name}'.")
        return SuccessResponse(message="No suggestion available.")
    return SuccessResponse(data=result.model_dump(by_alias=True))
