from lists.builders import dl_list, sl_list


def sum_list(lst) -> int:
    """Consume `lst` through its owned iterator and add the elements together."""
    return sum(lst.into_iter())


singly = sl_list(1, 2, 3, 4, 5)
doubly = dl_list(1, 2, 3, 4, 5)
print(f"{singly!r} -> {sum_list(singly)}")
print(f"{doubly!r} -> {sum_list(doubly)}")
print(f"after consuming: {singly}, {doubly}")
