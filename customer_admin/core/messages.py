"""Localized, user-facing messages for errors and enum labels."""

from customer_admin.core.exceptions import AdminConsoleError, ApiError, NetworkError

BUILDING_TYPE_LABELS = {
    "FACTORY": "공장",
    "KNOWLEDGE_INDUSTRY_CENTER": "지식산업센터",
    "BUILDING": "빌딩",
    "MIXED_USE_COMPLEX": "주상복합",
    "APARTMENT_COMPLEX": "아파트단지",
    "SCHOOL": "학교",
    "HOTEL": "호텔",
    "OTHER": "기타",
}

PROGRESS_STATUS_LABELS = {
    "REQUESTED": "의뢰",
    "IN_PROGRESS": "진행 중",
    "COMPLETE": "완료",
    "REJECTED": "반려",
}

FILE_CATEGORY_LABELS = {
    "BUSINESS_LICENSE": "사업자 등록증",
    "ELECTRICAL_DIAGRAM": "변전실 도면 (단선결선도)",
    "POWER_USAGE_DATA": "전력사용량 데이터 (고메타)",
    "FEASIBILITY_REPORT": "타당성 검토 보고서",
    "OTHER": "기타 문서",
}

SETTLEMENT_METHOD_LABELS = {
    "INVOICE": "세금계산서",
    "WITHHOLDING_TAX": "원천징수",
}

FEASIBILITY_STATUS_LABELS = {
    "pending": "검토 대기",
    "in_review": "검토 중",
    "approved": "승인",
    "rejected": "반려",
}


def describe_error(error: BaseException, operation: str) -> str:
    """Turn any error into a message fit for an alert or toast.

    Console errors raised on purpose already carry a localized message;
    everything else is classified by its text.
    """
    if isinstance(error, NetworkError):
        return error.message
    if isinstance(error, AdminConsoleError) and not isinstance(error, ApiError):
        return error.message

    text = str(error)
    lowered = text.lower()
    status = error.status_code if isinstance(error, ApiError) else None

    if "jwt" in lowered or "token" in lowered:
        return "인증 오류가 발생했습니다. 새로고침 후 다시 시도해주세요."
    if "network" in lowered or "fetch" in lowered:
        return "네트워크 연결을 확인해주세요."
    if status == 404 or "404" in text or "not found" in lowered:
        return "데이터를 찾을 수 없습니다."
    if status == 409 or "409" in text or "conflict" in lowered:
        return "이미 존재하는 데이터입니다."
    return text or f"{operation} 중 오류가 발생했습니다."
