import io

import pytest

from bidtree.csvparser import CsvError
from bidtree.tree import (
    Bid,
    BinarySearchTree,
    format_bid,
    load_bids,
    main,
    str_to_double,
)

HEADER = (
    "Title,ArticleID,Department,CloseDate,WinningBid,"
    "InventoryID,VehicleID,ReceiptNumber,Fund"
)


def make_tree(ids):
    tree = BinarySearchTree()
    for bid_id in ids:
        tree.insert(Bid(bid_id=bid_id, title="t" + bid_id, fund="F", amount=1.0))
    return tree


def ids_of(bids):
    return [bid.bid_id for bid in bids]


@pytest.fixture
def csv_file(tmp_path):
    lines = [
        HEADER,
        "Table,98109,Dept,1/1/2016,$234.00,INV1,VEH1,R1,General Fund",
        'Chair "Big, red",98223,Dept,1/2/2016,$12.50,INV2,VEH2,R2,Enterprise',
        "Lamp,97990,Dept,1/3/2016,$5.00,INV3,VEH3,R3,General Fund",
    ]
    path = tmp_path / "bids.csv"
    path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return path


def test_search_finds_inserted_bids():
    tree = make_tree(["5", "3", "8", "1", "4"])
    for bid_id in ["5", "3", "8", "1", "4"]:
        found = tree.search(bid_id)
        assert found is not None
        assert found.bid_id == bid_id
        assert found.title == "t" + bid_id


def test_search_missing_returns_none():
    tree = make_tree(["5", "3"])
    assert tree.search("7") is None
    assert BinarySearchTree().search("5") is None


def test_in_order_is_sorted():
    ids = ["50", "20", "80", "10", "30", "70", "90", "25"]
    tree = make_tree(ids)
    assert ids_of(tree.in_order()) == sorted(ids)
    assert ids_of(tree) == sorted(ids)


def test_pre_and_post_order():
    tree = make_tree(["5", "3", "8"])
    assert ids_of(tree.pre_order()) == ["5", "3", "8"]
    assert ids_of(tree.post_order()) == ["3", "8", "5"]


def test_empty_traversals():
    tree = BinarySearchTree()
    assert list(tree.in_order()) == []
    assert list(tree.pre_order()) == []
    assert list(tree.post_order()) == []


@pytest.mark.parametrize("victim", ["10", "30", "20", "50", "80", "70", "25"])
def test_remove_keeps_order_and_drops_bid(victim):
    ids = ["50", "20", "80", "10", "30", "70", "25"]
    tree = make_tree(ids)
    assert tree.remove(victim) is True
    remaining = sorted(i for i in ids if i != victim)
    assert ids_of(tree.in_order()) == remaining
    assert tree.search(victim) is None
    for bid_id in remaining:
        assert tree.search(bid_id).bid_id == bid_id


def test_remove_missing_returns_false():
    tree = make_tree(["5", "3"])
    assert tree.remove("9") is False
    assert ids_of(tree) == ["3", "5"]


def test_remove_only_node_empties_tree():
    tree = make_tree(["5"])
    assert tree.remove("5") is True
    assert list(tree) == []


def test_large_sorted_insert_does_not_recurse():
    ids = ["%06d" % n for n in range(5000)]
    tree = make_tree(ids)
    assert ids_of(tree) == ids
    assert tree.remove("002500") is True
    assert tree.search("002500") is None
    assert len(list(tree.post_order())) == 4999


def test_str_to_double():
    assert str_to_double("$234.00", "$") == 234.0
    assert str_to_double("$12.50", "$") == 12.5
    assert str_to_double("abc", "$") == 0.0
    assert str_to_double("12abc", "$") == 12.0


def test_format_bid():
    bid = Bid(bid_id="98109", title="Table", fund="General Fund", amount=234.5)
    assert format_bid(bid) == "98109: Table | 234.5 | General Fund"


def test_load_bids(csv_file, capsys):
    tree = BinarySearchTree()
    assert load_bids(str(csv_file), tree) == 3
    found = tree.search("98223")
    assert found.title == 'Chair "Big, red"'
    assert found.amount == 12.5
    assert found.fund == "Enterprise"
    assert ids_of(tree) == ["97990", "98109", "98223"]
    out = capsys.readouterr().out
    assert "Loading CSV file " + str(csv_file) in out
    assert "Title | ArticleID | " in out


def test_load_bids_missing_file(tmp_path):
    with pytest.raises(CsvError):
        load_bids(str(tmp_path / "absent.csv"), BinarySearchTree())


def test_load_bids_short_rows_stop_loading(tmp_path, capsys):
    path = tmp_path / "short.csv"
    path.write_text("A,B,C,D,E\nx,1,y,z,$3\n", encoding="utf-8")
    tree = BinarySearchTree()
    assert load_bids(str(path), tree) == 0
    assert list(tree) == []
    assert "CSVparser" in capsys.readouterr().err


def test_main_load_find_remove(csv_file, monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("1\n3\n4\n3\n9\n"))
    assert main([str(csv_file)]) == 0
    out = capsys.readouterr().out
    assert "98109: Table | 234 | General Fund" in out
    assert "Bid Id 98109 not found." in out
    assert out.rstrip().endswith("Good bye.")


def test_main_display_all_with_key(csv_file, monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("1\n2\nx\n3\n"))
    assert main([str(csv_file), "97990"]) == 0
    out = capsys.readouterr().out
    lamp = out.index("97990: Lamp")
    table = out.index("98109: Table")
    chair = out.index("98223:")
    assert lamp < table < chair
    assert "Please enter a selection" in out
    assert "Good bye." in out