"""
Schema setup service - apply the bundled SQL schema to a database.

Used once against a fresh hosted database, outside of Django migrations.
Re-running is safe: statements that fail because the object already exists
are skipped, anything else aborts the run.
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import List

from ..exceptions import SchemaSetupError

logger = logging.getLogger(__name__)

ALREADY_EXISTS_CODES = ('42P07', '42710')
ALREADY_EXISTS_PATTERNS = ('already exists', 'duplicate')


@dataclass
class SchemaRunResult:
    """Outcome of :func:`run_schema`."""
    executed: int = 0
    skipped: List[str] = field(default_factory=list)


def load_schema(path) -> str:
    """
    Read the schema file.

    Raises:
        SchemaSetupError: If the file is missing or empty.
    """
    path = Path(path)
    if not path.exists():
        raise SchemaSetupError(f'Schema file not found at: {path}')
    sql = path.read_text(encoding='utf-8')
    if not sql.strip():
        raise SchemaSetupError(f'Schema file is empty: {path}')
    return sql


def split_statements(sql: str) -> List[str]:
    """
    Split a SQL script into statements.

    Full-line and trailing ``--`` comments are removed, lines are trimmed,
    and the remaining text is split on ``;``. Empty statements are dropped.

    Example:
        >>> split_statements("CREATE TABLE a (id int); -- done\\n;")
        ['CREATE TABLE a (id int)']
    """
    lines = []
    for line in sql.splitlines():
        comment_at = line.find('--')
        if comment_at >= 0:
            line = line[:comment_at]
        line = line.strip()
        if line:
            lines.append(line)

    cleaned = '\n'.join(lines)
    return [s.strip() for s in cleaned.split(';') if s.strip()]


def is_already_exists(exc) -> bool:
    """True if ``exc`` only says the object is already there."""
    code = getattr(exc, 'pgcode', None) or getattr(exc, 'sqlstate', None)
    cause = exc.__cause__
    if code is None and cause is not None:
        code = getattr(cause, 'pgcode', None) or getattr(cause, 'sqlstate', None)
    if code in ALREADY_EXISTS_CODES:
        return True
    message = str(exc).lower()
    return any(pattern in message for pattern in ALREADY_EXISTS_PATTERNS)


def run_schema(statements, cursor, *, on_progress=None) -> SchemaRunResult:
    """
    Execute ``statements`` one by one on ``cursor``.

    Args:
        statements: Statements as returned by :func:`split_statements`.
        cursor: DB-API cursor (``connection.cursor()``).
        on_progress: Optional ``callable(index, total, statement, outcome)``
            where outcome is ``'ok'`` or ``'skipped'``.

    Returns:
        SchemaRunResult with the number executed and the skipped statements.

    Raises:
        SchemaSetupError: On the first error that is not "already exists".
            Statements after it are not executed.
    """
    result = SchemaRunResult()
    total = len(statements)

    for index, statement in enumerate(statements, start=1):
        try:
            cursor.execute(statement)
        except Exception as exc:
            if not is_already_exists(exc):
                logger.error('Schema statement %d/%d failed: %s', index, total, exc)
                raise SchemaSetupError(str(exc), statement=statement) from exc
            logger.info('Schema statement %d/%d skipped (already exists)', index, total)
            result.skipped.append(statement)
            if on_progress:
                on_progress(index, total, statement, 'skipped')
            continue

        result.executed += 1
        if on_progress:
            on_progress(index, total, statement, 'ok')

    return result
