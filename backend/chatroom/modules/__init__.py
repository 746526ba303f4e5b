from chatroom.modules.base import ModuleBase
from chatroom.modules.chat import ChatModule

MODULES: list[ModuleBase] = [
    ChatModule(),
]


def get_module(module_id: str) -> ModuleBase | None:
    for module in MODULES:
        if module.id == module_id:
            return module
    return None
