"""Tests for the interactive menu, driven through the click entry point."""

from click.testing import CliRunner

from hotel_desk.main import main

QUIET = ["--log-level", "CRITICAL"]


def run_menu(lines, sample_rooms=False):
    """Feed menu input line by line and return the click result."""
    args = ["--sample-rooms" if sample_rooms else "--no-sample-rooms", *QUIET]
    return CliRunner().invoke(main, args, input="\n".join(lines) + "\n")


class TestRoomMenu:
    """Tests for the room entries of the menu."""

    def test_add_and_list_room(self):
        """Test adding a room and seeing it in the full listing."""
        result = run_menu(["1", "101", "1", "100", "1", "6", "0"])

        assert result.exit_code == 0, result.output
        assert "Room 101 added" in result.output
        assert "Single" in result.output
        assert "100.00" in result.output
        assert "Available" in result.output
        assert "Goodbye." in result.output

    def test_add_duplicate_room_is_refused_early(self):
        """Test that the shell refuses a taken number before asking more."""
        result = run_menu(["1", "101", "0"], sample_rooms=True)

        assert result.exit_code == 0, result.output
        assert "Room 101 already exists" in result.output

    def test_negative_rate_is_reprompted(self):
        """Test that a negative rate is rejected by the prompt."""
        result = run_menu(["1", "7", "2", "-5", "80", "2", "0"])

        assert result.exit_code == 0, result.output
        assert "is not a valid amount" in result.output
        assert "Room 7 added" in result.output

    def test_oversized_rate_is_reprompted(self):
        """Test that a rate too wide for cents asks again instead of exiting."""
        result = run_menu(["1", "101", "1", "1e30", "100", "1", "0"])

        assert result.exit_code == 0, result.output
        assert "too large an amount" in result.output
        assert "Room 101 added" in result.output

    def test_update_room_rate(self):
        """Test changing a rate and seeing it in the listing."""
        result = run_menu(["3", "101", "1750.50", "6", "0"], sample_rooms=True)

        assert result.exit_code == 0, result.output
        assert "Room 101 rate set to 1750.50" in result.output
        assert "1,750.50" in result.output

    def test_update_room_rate_unknown_room(self):
        """Test that updating a missing room is reported."""
        result = run_menu(["3", "999", "10", "0"])

        assert result.exit_code == 0, result.output
        assert "Room 999 not found" in result.output

    def test_update_billing_policy(self):
        """Test switching a room to the premium policy."""
        result = run_menu(["4", "101", "2", "0"], sample_rooms=True)

        assert result.exit_code == 0, result.output
        assert "Room 101 billing policy set to Premium" in result.output

    def test_delete_unknown_room(self):
        """Test that deleting a missing room is reported, not fatal."""
        result = run_menu(["2", "999", "0"])

        assert result.exit_code == 0, result.output
        assert "Room 999 not found" in result.output

    def test_non_numeric_choice_is_reprompted(self):
        """Test that non-numeric menu input asks again."""
        result = run_menu(["abc", "0"])

        assert result.exit_code == 0, result.output
        assert "is not a valid integer" in result.output


class TestReservationMenu:
    """Tests for the reservation entries of the menu."""

    def test_book_and_view_details(self):
        """Test booking a room and printing the bill."""
        result = run_menu(
            ["7", "Ana Cruz", "0917", "201", "01/01/2024", "05/01/2024", "2", "9", "1", "0"],
            sample_rooms=True,
        )

        assert result.exit_code == 0, result.output
        assert "Reservation 1 created for room 201" in result.output
        assert "Nights" in result.output
        assert "10,000.00" in result.output

    def test_bad_dates_are_reprompted_and_capacity_is_reported(self):
        """Test the date prompts and a capacity refusal."""
        result = run_menu(
            [
                "7", "Ana Cruz", "0917", "101",
                "bad", "05/01/2024", "01/01/2024",
                "01/01/2024", "02/01/2024",
                "3",
                "11",
                "0",
            ],
            sample_rooms=True,
        )

        assert result.exit_code == 0, result.output
        assert "not in DD/MM/YYYY format" in result.output
        assert "must be after check-in" in result.output
        assert "holds at most 1 guest(s)" in result.output
        assert "No reservations to show." in result.output

    def test_booked_room_shows_occupied(self):
        """Test that the full listing marks a booked room as occupied."""
        result = run_menu(
            ["7", "Ana Cruz", "0917", "101", "01/01/2024", "03/01/2024", "1", "6", "0"],
            sample_rooms=True,
        )

        assert result.exit_code == 0, result.output
        assert "Occupied" in result.output

    def test_move_reservation(self):
        """Test moving a reservation to another room."""
        result = run_menu(
            [
                "7", "Ana Cruz", "0917", "101", "01/01/2024", "03/01/2024", "1",
                "10", "1", "2", "102",
                "11",
                "5",
                "0",
            ],
            sample_rooms=True,
        )

        assert result.exit_code == 0, result.output
        assert "moved from room 101 to room 102" in result.output

    def test_update_unknown_reservation(self):
        """Test that an unknown id stops the update flow."""
        result = run_menu(["10", "5", "0"])

        assert result.exit_code == 0, result.output
        assert "Reservation 5 not found" in result.output

    def test_cancel_reservation(self):
        """Test cancelling frees the room for a new booking."""
        result = run_menu(
            [
                "7", "Ana Cruz", "0917", "101", "01/01/2024", "03/01/2024", "1",
                "8", "1",
                "7", "Ben Reyes", "0918", "101", "04/01/2024", "06/01/2024", "1",
                "0",
            ],
            sample_rooms=True,
        )

        assert result.exit_code == 0, result.output
        assert "Reservation 1 cancelled" in result.output
        assert "Reservation 2 created for room 101" in result.output


def test_version():
    """Test the version option."""
    result = CliRunner().invoke(main, ["--version"])

    assert result.exit_code == 0
    assert "0.1.0" in result.output
