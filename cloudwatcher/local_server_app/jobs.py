import asyncio
from typing import List

from cloudwatcher.local_server_app.state import LocalServerState


class JobManager:
    def __init__(self):
        self.tasks: List[asyncio.Task] = []

    def start(self, coro, name: str):
        task = asyncio.create_task(coro, name=name)
        self.tasks.append(task)

    async def stop(self):
        for task in self.tasks:
            task.cancel()
        for task in self.tasks:
            try:
                await task
            except asyncio.CancelledError:
                pass
        self.tasks.clear()


async def poll_job(st: LocalServerState, stop_event: asyncio.Event):
    interval = st.settings.poll_interval
    while not stop_event.is_set():
        try:
            if st.driver.is_connected:
                status = await st.poll()
                st.log("weather_updated", {"status": status.value})
        except Exception as exc:
            st.log("weather_poll_failed", {"error": str(exc)})
        try:
            await asyncio.wait_for(stop_event.wait(), timeout=interval)
        except asyncio.TimeoutError:
            continue
