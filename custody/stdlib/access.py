from custody.execution.runtime import rt


def export(func):
    """Marks a registry method as callable from outside through the executor."""
    func.exported = True
    return func


def is_exported(func):
    return getattr(func, 'exported', False) is True


ctx = rt.context
