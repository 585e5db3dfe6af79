import asyncio

from ..core.config import settings
from ..core.database import execute

tables_ready = False
_tables_lock = asyncio.Lock()


async def ensure_tables():
    global tables_ready
    if tables_ready or not settings.auto_init_db:
        return
    async with _tables_lock:
        if tables_ready:
            return
        await _create_tables()
        tables_ready = True


async def _create_tables():
    await execute(
        """
        CREATE TABLE IF NOT EXISTS employees (
          id SERIAL PRIMARY KEY,
          name TEXT,
          employee_id TEXT,
          department TEXT,
          designation TEXT
        );
        CREATE TABLE IF NOT EXISTS attendance (
          id SERIAL PRIMARY KEY,
          employee_id INTEGER NOT NULL REFERENCES employees(id) ON DELETE CASCADE,
          date DATE NOT NULL,
          status TEXT NOT NULL
        );
        CREATE TABLE IF NOT EXISTS overtime (
          id SERIAL PRIMARY KEY,
          employee_id INTEGER NOT NULL REFERENCES employees(id) ON DELETE CASCADE,
          date DATE NOT NULL,
          hours NUMERIC NOT NULL
        );
        CREATE INDEX IF NOT EXISTS attendance_employee_idx ON attendance(employee_id);
        CREATE INDEX IF NOT EXISTS overtime_employee_idx ON overtime(employee_id);
        """
    )
