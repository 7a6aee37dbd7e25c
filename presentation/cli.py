# Command-line interface for the warehouse stock shell

from data.errors import StockkeeperError
from presentation.formatting import describe_error, render_items

USAGE = {
    "list": "list [electronics|groceries]",
    "add_stock": "add_stock <electronics|groceries> <id> <amount>",
    "set_qty": "set_qty <electronics|groceries> <id> <quantity>",
    "remove": "remove <electronics|groceries> <id>",
}


def _repository(manager, family):
    repos = {"electronics": manager.electronics, "groceries": manager.groceries}
    return repos.get(family)


def _parse_target(manager, parts, arity):
    """
    Resolves ``<family> <id> [<number>]`` arguments, or returns None after
    printing the usage line.
    """
    action = parts[0]
    if len(parts) != arity:
        print(f"Usage: {USAGE[action]}")
        return None
    repo = _repository(manager, parts[1])
    if repo is None:
        print(f"Unknown item family '{parts[1]}'. Use 'electronics' or 'groceries'.")
        return None
    try:
        numbers = [int(p) for p in parts[2:]]
    except ValueError:
        print("Item ID and quantity must be integers.")
        return None
    return repo, numbers


def handle_command(manager, command):
    """
    Handles one shell command against a WarehouseManager.
    """
    parts = command.split()
    if not parts:
        return
    action = parts[0]

    if action == "help":
        for usage in USAGE.values():
            print(usage)
    elif action == "list":
        families = parts[1:] or ["electronics", "groceries"]
        for family in families:
            repo = _repository(manager, family)
            if repo is None:
                print(f"Unknown item family '{family}'. Use 'electronics' or 'groceries'.")
                continue
            for line in render_items(repo.get_all()):
                print(line)
    elif action == "add_stock":
        target = _parse_target(manager, parts, 4)
        if target:
            repo, (item_id, amount) = target
            print(manager.increase_stock(repo, item_id, amount))
    elif action == "set_qty":
        target = _parse_target(manager, parts, 4)
        if target:
            repo, (item_id, quantity) = target
            try:
                item = repo.update_quantity(item_id, quantity)
                print(f"[OK] Quantity for #{item_id} set to {item.quantity}")
            except StockkeeperError as e:
                print(describe_error(e))
    elif action == "remove":
        target = _parse_target(manager, parts, 3)
        if target:
            repo, (item_id,) = target
            print(manager.remove_item_by_id(repo, item_id))
    else:
        print("Unknown command.")


def run_shell(manager, read=input):
    while True:
        try:
            user_input = read("Enter command (e.g., 'list', 'add_stock electronics 1 5', 'help', 'exit'): ")
        except EOFError:
            break
        if user_input.strip().lower() == "exit":
            break
        handle_command(manager, user_input)
