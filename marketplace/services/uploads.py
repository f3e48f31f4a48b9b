"""
업로드 파일 저장
"""

from pathlib import Path
from typing import Iterable, List, Optional

from fastapi import UploadFile

from marketplace.config import settings
from marketplace.domain.rules import upload_filename
from marketplace.monitoring import get_logger

logger = get_logger(__name__)


def is_present(upload: Optional[UploadFile]) -> bool:
    """파일 없이 전송된 빈 필드 제외"""
    return upload is not None and bool(upload.filename)


async def save_upload(upload: UploadFile, directory: Optional[Path] = None) -> str:
    """
    업로드 파일을 저장하고 저장된 파일명 반환

    Args:
        upload: 업로드 파일
        directory: 저장 경로 (기본값: settings.upload_path)

    Returns:
        <나노초>-<원본 파일명>
    """
    directory = directory or settings.upload_path
    directory.mkdir(parents=True, exist_ok=True)

    name = upload_filename(upload.filename)
    content = await upload.read()
    (directory / name).write_bytes(content)

    logger.debug(f"파일 저장: {name} ({len(content)} bytes)")
    return name


async def save_uploads(uploads: Iterable[Optional[UploadFile]]) -> List[str]:
    return [await save_upload(upload) for upload in uploads if is_present(upload)]


def remove_uploads(names: Iterable[str], directory: Optional[Path] = None) -> None:
    """저장된 업로드 파일 삭제 (이미 없는 파일은 무시)"""
    directory = directory or settings.upload_path
    for name in names:
        # 저장 경로 밖의 파일은 건드리지 않는다
        path = directory / Path(name).name
        path.unlink(missing_ok=True)
        logger.debug(f"파일 삭제: {path.name}")
