from .base import BaseDTO, BaseRequest, BaseResponse

__all__ = ['BaseDTO', 'BaseRequest', 'BaseResponse']
