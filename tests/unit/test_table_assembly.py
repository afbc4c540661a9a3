"""Unit tests for table view-model assembly and table state"""
import pytest

from table.assembler import HeaderView, assemble_table
from table.columns import REACTION_COLUMNS, InvalidColumnOrderError, UnknownColumnError
from table.sorting import DEFAULT_SORT, SortDirection, SortState
from table.state import TableState


DECLARED = ["video", "reaction", "reportCount", "createdAt"]


class TestAssembleTable:
    """Headers follow column order, rows follow sort state"""

    def test_headers_in_column_order(self, sample_reactions):
        """Test headers follow the requested column order"""
        order = ["createdAt", "video", "reportCount", "reaction"]

        view = assemble_table(sample_reactions, REACTION_COLUMNS, order, None)

        assert [h.id for h in view.headers] == order
        assert [h.label for h in view.headers] == ["Created At", "Video", "Reports", "Reaction"]
        assert all(h.sortable for h in view.headers)

    def test_sort_indicator_on_active_column(self, sample_reactions):
        """Test only the active column carries a sort direction"""
        view = assemble_table(sample_reactions, REACTION_COLUMNS, DECLARED, DEFAULT_SORT)

        assert view.headers[3] == HeaderView(
            id="createdAt", label="Created At", sortable=True, sorted=SortDirection.DESC
        )
        assert [h.sorted for h in view.headers[:3]] == [None, None, None]

    def test_rows_sorted(self, sample_reactions):
        """Test rows follow the sort state"""
        view = assemble_table(sample_reactions, REACTION_COLUMNS, DECLARED, DEFAULT_SORT)

        assert [r.reaction_id for r in view.rows] == ["x2", "x4", "x3", "x1"]

    def test_unsorted_rows_keep_input_order(self, sample_reactions):
        """Test unsorted table keeps input row order"""
        view = assemble_table(sample_reactions, REACTION_COLUMNS, DECLARED, None)

        assert view.rows == sample_reactions

    def test_inputs_not_mutated(self, sample_reactions):
        """Test assembly leaves rows, columns and order untouched"""
        rows_before = list(sample_reactions)
        columns_before = tuple(REACTION_COLUMNS)
        order = list(DECLARED)

        assemble_table(sample_reactions, REACTION_COLUMNS, order, SortState("reportCount", SortDirection.ASC))

        assert sample_reactions == rows_before
        assert REACTION_COLUMNS == columns_before
        assert order == DECLARED

    def test_repeated_calls_identical(self, sample_reactions):
        """Test repeated assembly yields equal view-models"""
        first = assemble_table(sample_reactions, REACTION_COLUMNS, DECLARED, DEFAULT_SORT)
        second = assemble_table(sample_reactions, REACTION_COLUMNS, DECLARED, DEFAULT_SORT)

        assert first == second

    def test_unknown_column_in_order(self, sample_reactions):
        """Test an undefined column id in the order raises"""
        with pytest.raises(UnknownColumnError):
            assemble_table(sample_reactions, REACTION_COLUMNS, ["video", "reaction", "reportCount", "views"], None)

    def test_missing_column_in_order(self, sample_reactions):
        """Test an incomplete column order raises"""
        with pytest.raises(InvalidColumnOrderError):
            assemble_table(sample_reactions, REACTION_COLUMNS, ["video", "reaction"], None)

    def test_unknown_sort_column(self, sample_reactions):
        """Test sorting by an undefined column raises"""
        with pytest.raises(UnknownColumnError):
            assemble_table(sample_reactions, REACTION_COLUMNS, DECLARED, SortState("views"))

    def test_empty_rows(self):
        """Test an empty row list still yields all headers"""
        view = assemble_table([], REACTION_COLUMNS, DECLARED, DEFAULT_SORT)

        assert view.rows == []
        assert len(view.headers) == 4


class TestTableState:
    """Per-table state with value transitions"""

    def test_initial_state(self):
        """Test initial state uses declaration order and default sort"""
        state = TableState.initial()

        assert state.column_order.order == tuple(DECLARED)
        assert state.sort == DEFAULT_SORT

    def test_transitions_return_new_state(self):
        """Test reorder and toggle leave the original state unchanged"""
        state = TableState.initial()

        reordered = state.reorder("video", "reportCount")
        toggled = state.toggle_sort("reportCount")

        assert reordered.column_order.order == ("reaction", "reportCount", "video", "createdAt")
        assert toggled.sort == SortState("reportCount", SortDirection.ASC)
        assert state == TableState.initial()

    def test_independent_instances(self):
        """Test two tables do not share sort state"""
        first = TableState.initial().toggle_sort("createdAt")
        second = TableState.initial()

        assert first.sort is None
        assert second.sort == DEFAULT_SORT

    def test_view_uses_state(self, sample_reactions):
        """Test view applies the state's order and sort"""
        state = TableState.initial().reorder("createdAt", "video").toggle_sort("reportCount")

        view = state.view(sample_reactions)

        assert [h.id for h in view.headers] == ["createdAt", "video", "reaction", "reportCount"]
        assert [r.report_count for r in view.rows] == [0, 1, 2, 5]

    def test_toggle_unknown_column(self):
        """Test toggling an undefined column raises"""
        with pytest.raises(UnknownColumnError):
            TableState.initial().toggle_sort("views")
