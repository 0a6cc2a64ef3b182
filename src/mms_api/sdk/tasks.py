"""
MMS trainer task SDK functions.
"""

import threading
from typing import List, Optional

from mms_api.sdk.models import Task
from mms_api.sdk.protocols import Dispatcher
from mms_api.sdk.request_options import TasksRequest, path_segment
from mms_api.sdk.types import TASK_API_ROOT


def retrieve_task_details(
    client: Dispatcher, task_id: str, cancel: Optional[threading.Event] = None
) -> Task:
    """GET tasks/{taskId}"""
    return client.fetch(f"{TASK_API_ROOT}/{path_segment(task_id)}", Task, cancel)


def update_task(
    client: Dispatcher, task_id: str, task: Task, cancel: Optional[threading.Event] = None
) -> Task:
    """PUT tasks/{taskId}"""
    return client.put(f"{TASK_API_ROOT}/{path_segment(task_id)}", Task, task, cancel)


def retrieve_all_tasks(
    client: Dispatcher,
    request: Optional[TasksRequest] = None,
    cancel: Optional[threading.Event] = None,
) -> List[Task]:
    """
    List trainer tasks.

    GET tasks[?modifiedSince=...]
    """
    request = request or TasksRequest()
    return client.fetch(TASK_API_ROOT + request.to_query_params(), List[Task], cancel)


def create_task(
    client: Dispatcher, task: Task, cancel: Optional[threading.Event] = None
) -> Task:
    """POST tasks"""
    return client.send(TASK_API_ROOT, Task, task, cancel)
