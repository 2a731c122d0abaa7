from . import db


class Network(db.Model):
    __tablename__ = 'networks'
    __table_args__ = (
        db.UniqueConstraint('user_id', 'title', name='uq_networks_user_title'),
    )

    id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(db.Integer, db.ForeignKey('users.id'), nullable=False, index=True)
    title = db.Column(db.String(255), nullable=False)
    network = db.Column(db.String(255), nullable=False)
    # Fernet token, never plaintext
    password = db.Column(db.Text, nullable=False)

    def to_dict(self):
        return {
            'id': self.id,
            'userId': self.user_id,
            'title': self.title,
            'network': self.network,
            'password': self.password,
        }
