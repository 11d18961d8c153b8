# bidtree

Keep auction bids in a binary search tree, loaded from a CSV export, and
browse them from an interactive menu. The package also ships a small
console for reviewing and changing the service choice of a fixed set of
five clients.

## Installing

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## The bid browser

```
bidtree [CSV_PATH [BID_ID]]
```

With no arguments the file `eBid_Monthly_Sales_Dec_2016.csv` in the
current directory is used and bid `98109` is the one to look up. Pass a
path to read another file, and a bid id after it to look up another bid.

The menu offers:

```
Menu:
  1. Load Bids
  2. Display All Bids
  3. Find Bid
  4. Remove Bid
  9. Exit Program
```

* **Load Bids** reads the CSV file, prints its header row, inserts the
  bids into the tree and reports the time taken. Problems reading the
  file are reported on standard error.
* **Display All Bids** prints every bid in order of its id, one per line
  as `id: title | amount | fund`.
* **Find Bid** looks up the chosen bid id and prints it, or prints
  `Bid Id <id> not found.`, with the time taken.
* **Remove Bid** removes the chosen bid id from the tree.

Any other number prints `Please enter a selection`. Choosing 9, or
ending the input, prints `Good bye.` and exits.

The CSV file must have a header line. Each bid is taken from these
columns, counted from zero: title from column 0, bid id from column 1,
amount from column 4 (every `$` is stripped and the leading number is
read, `0` if there is none) and fund from column 8. Commas inside double
quotes do not split a field. A row with a different number of fields
than the header is reported as corrupted data.

## The client console

```
bidtree-clients
```

Asks for a username and a password. The username is read but not
checked; the accepted password is `password`. After four failed
attempts the console prints `Max login attempts reached` and ends.

Once logged in, the menu offers:

* **1** shows the numbered client list with each client's service
  choice (1 = Brokerage, 2 = Retirement).
* **2** shows the list, then asks for a client number and a new service
  choice. A client number outside 1 to 5 changes nothing.
* **3** exits.

## Using the library

```python
from bidtree.csvparser import Parser, DataType
from bidtree.tree import Bid, BinarySearchTree, format_bid

text = "name,id\nwidget,1\ngadget,2\n"
parser = Parser(text, DataType.PURE, ",")
print(parser.header)          # ['name', 'id']
print(parser.row_count())     # 2
print(parser[0]["name"])      # widget
print(parser[1].get_value(1, int))  # 2

tree = BinarySearchTree()
tree.insert(Bid(bid_id="2", title="gadget", fund="General", amount=5.0))
tree.insert(Bid(bid_id="1", title="widget", fund="General", amount=3.5))
print([bid.bid_id for bid in tree.in_order()])   # ['1', '2']
print(format_bid(tree.search("1")))              # 1: widget | 3.5 | General
tree.remove("1")                                 # True
```

`bidtree.csvparser`:

* `Parser(data, data_type=DataType.FILE, sep=",")` reads either a file
  path (`DataType.FILE`) or text held in memory (`DataType.PURE`). Rows
  are reached with `parser[i]` or `get_row(i)`; `row_count()`,
  `column_count()`, `header`, `header_element(i)` and `file_name`
  describe the content. `add_row(position, values)` and
  `delete_row(position)` edit the rows and return `False` when the
  position is out of range; `sync()` writes header and rows back to the
  file that was read.
* `Row` values are reached by position or by header name. `set(key,
  value)` replaces a value, `get_value(position, kind)` converts the
  first token of a value, `str(row)` joins values with ` | ` and
  `to_csv()` joins them with commas.
* A missing file, empty input, a malformed row or a lookup that does
  not exist raises `CsvError`.

`bidtree.tree`:

* `BinarySearchTree` offers `insert`, `remove` (returns `False` if the
  id is absent), `search` (returns `None` if absent) and the traversals
  `in_order`, `pre_order` and `post_order`; iterating the tree gives
  bids in order.
* `load_bids(csv_path, tree)` loads a CSV file as described above and
  returns the number of bids inserted.
* `str_to_double(text, ch)` and `format_bid(bid)` are the helpers the
  browser uses.

`bidtree.clients` offers `check_user_permission_access(password)`,
`display_info(choices)` and `change_customer_choice(choices,
client_number, service)`, which returns a new list.

## What it does not do

There is no graphical interface and no user registration. The client
console holds a fixed list of five clients and one built-in password;
changes to service choices last only until the console exits and are not
stored anywhere. The bid tree likewise lives only in memory.