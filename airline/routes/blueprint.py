class Command:
    def __init__(self, code, label, role, handler):
        self.code = code
        self.label = label
        self.role = role            # None for the logged-out menu
        self.handler = handler

    def __repr__(self):
        return f"Command({self.code}, {self.label!r})"


class Blueprint:
    """
    A group of menu commands that belong to one role.

    Handlers are registered with the ``command`` decorator and receive the
    MenuContext of the running session::

        admin_bp = Blueprint('admin', role=Role.MANAGER)

        @admin_bp.command(1, "View flight schedule")
        def view_schedule(ctx):
            ...
    """

    def __init__(self, name, role=None):
        self.name = name
        self.role = role
        self.commands = []

    def command(self, code, label):
        def decorator(func):
            if any(existing.code == code for existing in self.commands):
                raise ValueError(f"Command {code} registered twice in blueprint {self.name}")
            self.commands.append(Command(code, label, self.role, func))
            return func
        return decorator
