def split_name(full_name):
    """
    Split a person's name into first and last name.

    Parameters:
    - full_name: The name as entered, e.g. "Emma Farrell Jr." or "{Wang} Wei Ling"

    Returns:
    - A tuple (first_name, last_name). When part of the name is wrapped in
      braces, that part is the last name. Otherwise the last word is the last
      name and everything before it is the first name.
    """
    if full_name is None:
        return "", ""

    name = full_name.strip()
    if not name:
        return "", ""

    # Braces mark the last name explicitly
    start, end = name.find("{"), name.find("}")
    if start != -1 and end > start:
        last_name = name[start + 1 : end].strip()
        first_name = (name[:start] + name[end + 1 :]).strip()
        return " ".join(first_name.split()), " ".join(last_name.split())

    parts = name.split()
    return " ".join(parts[:-1]), parts[-1]


def get_indent(length):
    return " " * length
