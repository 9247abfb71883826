"""
Base use case classes.
"""
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Generic, Optional, TypeVar

InputDTO = TypeVar('InputDTO')
OutputDTO = TypeVar('OutputDTO')


@dataclass
class UseCaseResult(Generic[OutputDTO]):
    """Successful use case output; failures are raised as domain exceptions."""
    data: Optional[OutputDTO] = None
    created: bool = False

    @classmethod
    def ok(cls, data: OutputDTO, created: bool = False) -> 'UseCaseResult[OutputDTO]':
        return cls(data=data, created=created)


class UseCase(ABC, Generic[InputDTO, OutputDTO]):
    """Base use case class."""

    @abstractmethod
    def execute(self, input_dto: InputDTO) -> UseCaseResult[OutputDTO]:
        """Execute the use case."""
