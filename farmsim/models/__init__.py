"""数据模型层"""

from .job import Job, execution_time
from .server import Server
from .farm import ServerFarm, create_server_farm

__all__ = ["Job", "Server", "ServerFarm", "create_server_farm", "execution_time"]
