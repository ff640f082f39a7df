from flask_sqlalchemy import SQLAlchemy

db = SQLAlchemy()


class User(db.Model):
    __tablename__ = 'users'
    id = db.Column(db.Integer, primary_key=True)
    username = db.Column(db.String(50), nullable=False)
    email = db.Column(db.String(120), unique=True, nullable=False)
    phone = db.Column(db.String(20), unique=True, nullable=False)
    # bcrypt hash, never the plain password
    password_hash = db.Column('password', db.LargeBinary(60), nullable=False)
    role = db.Column(db.String(20), nullable=False, default='user')

    @property
    def is_admin(self):
        return self.role == 'admin'

    def __repr__(self):
        return f"<User {self.id} {self.email}>"


class Show(db.Model):
    __tablename__ = 'shows'
    id = db.Column(db.Integer, primary_key=True)
    title = db.Column(db.String(200), nullable=False)
    description = db.Column(db.Text, nullable=False, default='')
    hall = db.Column(db.String(100), nullable=False)
    start_at = db.Column(db.DateTime, nullable=False)
    rows = db.Column(db.Integer, nullable=False)
    cells = db.Column(db.Integer, nullable=False)

    def __repr__(self):
        return f"<Show {self.id} {self.title}>"


class Ticket(db.Model):
    __tablename__ = 'tickets'
    __table_args__ = (
        db.UniqueConstraint('show_id', 'pos_row', 'cell', name='uq_tickets_show_row_cell'),
    )
    id = db.Column(db.Integer, primary_key=True)
    # tickets are removed by TicketRepository before their show or user, no ON DELETE CASCADE
    show_id = db.Column(db.Integer, db.ForeignKey('shows.id'), nullable=False)
    user_id = db.Column(db.Integer, db.ForeignKey('users.id'), nullable=False)
    row = db.Column('pos_row', db.Integer, nullable=False)
    cell = db.Column(db.Integer, nullable=False)
    created_at = db.Column(db.DateTime, server_default=db.func.now())

    def __repr__(self):
        return f"<Ticket {self.id} show={self.show_id} row={self.row} cell={self.cell}>"
